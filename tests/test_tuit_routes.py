"""
Tuiter Backend — Tuit Route Tests
===================================

What:  HTTP-level tests for the tuit endpoints (real TuitDao, in-memory collection).

What we test:
    ✅ Create → get → delete → get round trip returns `null` at the end
    ✅ PUT and DELETE act on the document named by the `{tid}` path parameter
    ✅ GET of a missing tuit answers 200 with `null`
    ✅ Empty tuit text answers 400 with a validation error body
    ✅ Updates that would break the stored tuit answer 400 and write nothing
    ✅ Driver failures answer 500 without leaking driver details
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from tuiter.daos.tuit_dao import TuitDao, get_tuit_dao

ZERO_STATS = {
    "replies": 0,
    "retuits": 0,
    "likes": 0,
    "dislikes": 0,
    "currentUserLike": 0,
    "currentUserDislike": 0,
}


class TestTuitLifecycle:
    """Create, read and delete through HTTP."""

    @pytest.mark.asyncio
    async def test_create_get_delete_round_trip(self, test_client):
        """Create, read back, delete, then read null."""
        response = await test_client.post("/users/u1/tuits", json={"tuit": "hello"})
        assert response.status_code == 200
        created = response.json()
        assert created["_id"]
        assert created["tuit"] == "hello"
        assert created["postedBy"] == "u1"
        assert created["postedOn"]
        assert created["stats"] == ZERO_STATS

        response = await test_client.get(f"/tuits/{created['_id']}")
        assert response.status_code == 200
        assert response.json() == created

        response = await test_client.delete(f"/tuits/{created['_id']}")
        assert response.status_code == 200
        assert response.json() == {"deletedCount": 1}

        response = await test_client.get(f"/tuits/{created['_id']}")
        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_body_author_is_ignored(self, test_client):
        """The author always comes from the URL."""
        response = await test_client.post(
            "/users/u1/tuits", json={"tuit": "hello", "postedBy": "u2"}
        )

        assert response.json()["postedBy"] == "u1"

    @pytest.mark.asyncio
    async def test_optional_media_fields_round_trip(self, test_client):
        """Media references are stored and returned unchanged."""
        body = {
            "tuit": "look",
            "image": "cat.png",
            "youtube": "dQw4w9WgXcQ",
            "avatarLogo": "logo.png",
            "imageOverlay": "overlay.png",
        }
        created = (await test_client.post("/users/u1/tuits", json=body)).json()

        for key, value in body.items():
            assert created[key] == value


class TestTuitReads:
    """GET routes for tuits."""

    @pytest.mark.asyncio
    async def test_find_all(self, test_client):
        """GET /tuits lists tuits of every author."""
        await test_client.post("/users/u1/tuits", json={"tuit": "one"})
        await test_client.post("/users/u2/tuits", json={"tuit": "two"})

        response = await test_client.get("/tuits")

        assert response.status_code == 200
        assert sorted(t["tuit"] for t in response.json()) == ["one", "two"]

    @pytest.mark.asyncio
    async def test_find_by_user(self, test_client):
        """GET /users/{uid}/tuits lists only that user's tuits."""
        uid = str(ObjectId())
        await test_client.post(f"/users/{uid}/tuits", json={"tuit": "mine"})
        await test_client.post("/users/u2/tuits", json={"tuit": "theirs"})

        response = await test_client.get(f"/users/{uid}/tuits")

        assert [t["tuit"] for t in response.json()] == ["mine"]
        assert response.json()[0]["postedBy"] == uid

    @pytest.mark.asyncio
    async def test_find_by_user_without_tuits_is_empty_array(self, test_client):
        """A user with no tuits gets an empty array."""
        response = await test_client.get("/users/nobody/tuits")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_missing_tuit_is_null(self, test_client):
        """An unknown tid answers 200 with null."""
        response = await test_client.get(f"/tuits/{ObjectId()}")

        assert response.status_code == 200
        assert response.json() is None


class TestTuitMutationsUsePathId:
    """
    PUT/DELETE /tuits/{tid} must act on `tid`. Handlers that read a
    differently named parameter would never match a document.
    """

    @pytest.mark.asyncio
    async def test_update_targets_path_tid(self, test_client):
        """PUT changes the tuit named in the path and no other."""
        keep = (await test_client.post("/users/u1/tuits", json={"tuit": "keep"})).json()
        target = (await test_client.post("/users/u1/tuits", json={"tuit": "old"})).json()

        response = await test_client.put(f"/tuits/{target['_id']}", json={"tuit": "new"})

        assert response.status_code == 200
        assert response.json() == {"matchedCount": 1, "modifiedCount": 1}
        assert (await test_client.get(f"/tuits/{target['_id']}")).json()["tuit"] == "new"
        assert (await test_client.get(f"/tuits/{keep['_id']}")).json()["tuit"] == "keep"

    @pytest.mark.asyncio
    async def test_delete_targets_path_tid(self, test_client):
        """DELETE removes the tuit named in the path and no other."""
        keep = (await test_client.post("/users/u1/tuits", json={"tuit": "keep"})).json()
        target = (await test_client.post("/users/u1/tuits", json={"tuit": "gone"})).json()

        response = await test_client.delete(f"/tuits/{target['_id']}")

        assert response.json() == {"deletedCount": 1}
        assert (await test_client.get(f"/tuits/{target['_id']}")).json() is None
        assert (await test_client.get(f"/tuits/{keep['_id']}")).json() is not None

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields_and_replaces_stats(self, test_client):
        """Omitted fields keep their values; a supplied stats block replaces the stored one."""
        created = (
            await test_client.post(
                "/users/u1/tuits", json={"tuit": "hello", "image": "a.png", "stats": {"likes": 2}}
            )
        ).json()

        await test_client.put(f"/tuits/{created['_id']}", json={"stats": {"retuits": 7}})
        updated = (await test_client.get(f"/tuits/{created['_id']}")).json()

        assert updated["tuit"] == "hello"
        assert updated["image"] == "a.png"
        assert updated["postedOn"] == created["postedOn"]
        assert updated["stats"] == {**ZERO_STATS, "retuits": 7}

    @pytest.mark.asyncio
    async def test_delete_missing_tuit_reports_zero(self, test_client):
        """Deleting an unknown tid answers deletedCount 0."""
        response = await test_client.delete(f"/tuits/{ObjectId()}")

        assert response.status_code == 200
        assert response.json() == {"deletedCount": 0}


class TestTuitErrors:
    """Error responses of the tuit routes."""

    @pytest.mark.asyncio
    async def test_empty_text_is_validation_error(self, test_client, tuits_collection):
        """Empty text answers 400 with the failing field and the request id."""
        response = await test_client.post("/users/u1/tuits", json={"tuit": ""})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["fields"] == ["tuit"]
        assert body["request_id"] == response.headers["X-Request-ID"]
        assert tuits_collection.docs == []

    @pytest.mark.asyncio
    async def test_wrong_body_type_is_rejected_by_fastapi(self, test_client):
        """A counter of the wrong type is rejected by request parsing with 422."""
        response = await test_client.post(
            "/users/u1/tuits", json={"tuit": "hi", "stats": {"likes": "many"}}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_database_failure_is_generic_500(self, test_client):
        """Driver errors answer 500 without driver details."""
        from tuiter.main import app

        collection = MagicMock()
        collection.find_one = AsyncMock(
            side_effect=ServerSelectionTimeoutError("localhost:27017: connection refused")
        )
        app.dependency_overrides[get_tuit_dao] = lambda: TuitDao(collection)

        response = await test_client.get(f"/tuits/{ObjectId()}")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "27017" not in body["message"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body, field",
        [({"stats": None}, "stats"), ({"tuit": ""}, "tuit"), ({"postedOn": None}, "postedOn")],
    )
    async def test_invalid_update_is_rejected_and_reads_keep_working(
        self, test_client, body, field
    ):
        """An update the stored tuit cannot hold answers 400 and leaves the tuit readable."""
        created = (await test_client.post("/users/u1/tuits", json={"tuit": "hi"})).json()

        response = await test_client.put(f"/tuits/{created['_id']}", json=body)

        assert response.status_code == 400
        assert response.json()["details"]["fields"] == [field]

        listing = await test_client.get("/tuits")
        assert listing.status_code == 200
        assert listing.json() == [created]
