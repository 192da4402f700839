"""
Tuiter Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Tests run without a MongoDB server: DAOs work against an in-memory
       stand-in for the slice of PyMongo's async collection API they call.

Fixtures:
    ├── tuits_collection / users_collection: fresh in-memory collections
    ├── tuit_dao / user_dao: real DAOs bound to those collections
    ├── mock_database: MagicMock database for the health route
    └── test_client: HTTPX AsyncClient with the DAO dependencies overridden
"""

import os

# Override settings for testing BEFORE any tuiter imports
os.environ["MONGODB_URL"] = "mongodb://localhost:27017"
os.environ["MONGODB_DATABASE"] = "tuiter_test"
os.environ["LOG_LEVEL"] = "WARNING"

from copy import deepcopy
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from tuiter.daos.tuit_dao import TuitDao, get_tuit_dao
from tuiter.daos.user_dao import UserDao, get_user_dao
from tuiter.database import get_database


# ══════════════════════════════════════════════════════════════════════════
# In-memory collection
# ══════════════════════════════════════════════════════════════════════════

def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


def _set_path(doc: Dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    for part in parents:
        doc = doc.setdefault(part, {})
    doc[leaf] = value


class InMemoryCursor:
    def __init__(self, docs: List[Dict[str, Any]]):
        self._docs = docs

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return [deepcopy(doc) for doc in self._docs[:length]]


class InMemoryCollection:
    """
    Equality-only queries, `$set` with dotted paths, and result objects with
    the attribute names of PyMongo's InsertOneResult/UpdateResult/DeleteResult.
    Calls are also recorded on `self.calls` for assertions.
    """

    def __init__(self):
        self.docs: List[Dict[str, Any]] = []
        self.calls: List[str] = []

    def find(self, query: Optional[Dict[str, Any]] = None) -> InMemoryCursor:
        self.calls.append("find")
        return InMemoryCursor([d for d in self.docs if _matches(d, query or {})])

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append("find_one")
        for doc in self.docs:
            if _matches(doc, query):
                return deepcopy(doc)
        return None

    async def insert_one(self, doc: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("insert_one")
        # PyMongo adds the generated _id to the caller's dict
        doc.setdefault("_id", ObjectId())
        self.docs.append(deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("update_one")
        for doc in self.docs:
            if _matches(doc, query):
                before = deepcopy(doc)
                for path, value in update["$set"].items():
                    _set_path(doc, path, value)
                return SimpleNamespace(matched_count=1, modified_count=int(doc != before))
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("delete_one")
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: Dict[str, Any]) -> SimpleNamespace:
        self.calls.append("delete_many")
        kept = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(kept)
        self.docs = kept
        return SimpleNamespace(deleted_count=deleted)

    async def count_documents(self, query: Dict[str, Any], limit: Optional[int] = None) -> int:
        self.calls.append("count_documents")
        count = sum(1 for d in self.docs if _matches(d, query))
        return min(count, limit) if limit else count


# ══════════════════════════════════════════════════════════════════════════
# Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def tuits_collection():
    return InMemoryCollection()


@pytest.fixture
def users_collection():
    return InMemoryCollection()


@pytest.fixture
def tuit_dao(tuits_collection):
    return TuitDao(tuits_collection)


@pytest.fixture
def user_dao(users_collection):
    return UserDao(users_collection)


@pytest.fixture
def mock_database():
    """A database whose `ping` command succeeds; tests swap in failures."""
    db = MagicMock()
    db.command = AsyncMock(return_value={"ok": 1.0})
    return db


@pytest.fixture
def sample_user_data():
    return {
        "username": "alice",
        "password": "alice123",
        "firstName": "Alice",
        "email": "alice@example.com",
    }


@pytest_asyncio.fixture
async def test_client(tuit_dao, user_dao, mock_database):
    """
    HTTPX AsyncClient talking to the app in-process.

    The DAO and database dependencies are overridden, so no request reaches
    MongoDB. ASGITransport does not run the lifespan, so no indexes are built.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from tuiter.main import app

    app.dependency_overrides[get_tuit_dao] = lambda: tuit_dao
    app.dependency_overrides[get_user_dao] = lambda: user_dao
    app.dependency_overrides[get_database] = lambda: mock_database

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
