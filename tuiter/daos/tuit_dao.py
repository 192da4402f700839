"""
Tuiter Backend — Tuit DAO
===========================

What:  Data access for the `tuits` collection.
Who:   Called by the tuit route handlers (tuiter.routes.tuits).

Query Map:
    find_all_tuits        find({})
    find_tuit_by_id       find_one({_id})
    find_tuits_by_user    find({postedBy})            → idx_tuits_posted_by
    create_tuit           insert_one(doc)
    update_tuit           update_one({_id}, {$set})   (count_documents for an empty body)
    delete_tuit           delete_one({_id})
"""

import logging
from typing import List, Optional

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from tuiter.daos.base import BaseDao
from tuiter.database import TUITS_COLLECTION, as_object_id, get_database
from tuiter.models.tuit import Tuit
from tuiter.schemas.common import DeleteStatus, UpdateStatus
from tuiter.schemas.tuit import TuitCreate, TuitUpdate

logger = logging.getLogger(__name__)


class TuitDao(BaseDao):
    """Storage operations for tuits. Stateless apart from the collection handle."""

    resource = "tuit"

    async def find_all_tuits(self) -> List[Tuit]:
        """Every tuit in the collection. Unbounded: there is no pagination."""
        with self._driver_errors("find"):
            docs = await self.collection.find({}).to_list()
        return [Tuit.model_validate(doc) for doc in docs]

    async def find_tuit_by_id(self, tid: str) -> Optional[Tuit]:
        """The tuit with primary key `tid`, or None."""
        with self._driver_errors("find", tid=tid):
            doc = await self.collection.find_one({"_id": as_object_id(tid)})
        return Tuit.model_validate(doc) if doc is not None else None

    async def find_tuits_by_user(self, uid: str) -> List[Tuit]:
        """All tuits whose `postedBy` is `uid`; an empty list for a user with none."""
        with self._driver_errors("find", uid=uid):
            docs = await self.collection.find({"postedBy": as_object_id(uid)}).to_list()
        return [Tuit.model_validate(doc) for doc in docs]

    async def create_tuit(self, uid: str, payload: TuitCreate) -> Tuit:
        """
        Inserts a new tuit authored by `uid`.

        The author always comes from `uid`, whatever `postedBy` the payload
        carries. Defaults (postedOn, stats) are applied here; a payload
        without tuit text raises ValidationError and nothing is written.
        """
        data = payload.model_dump(by_alias=True, exclude_unset=True)
        data["postedBy"] = uid
        tuit = self._build(Tuit, data)

        doc = tuit.to_document()
        doc["postedBy"] = as_object_id(uid)
        with self._driver_errors("create", uid=uid):
            result = await self.collection.insert_one(doc)

        doc["_id"] = result.inserted_id
        logger.info("Tuit %s created by user %s", result.inserted_id, uid)
        return Tuit.model_validate(doc)

    async def update_tuit(self, tid: str, payload: TuitUpdate) -> UpdateStatus:
        """
        `$set`s exactly the fields present in `payload`; everything else keeps
        its stored value. A supplied `stats` block replaces the stored one,
        with omitted counters back at 0.

        Raises:
            ValidationError: a value the stored document may not hold
                (empty `tuit`, null `stats` or `postedOn`); nothing is written
        """
        fields = self._build_update(Tuit, payload.model_dump(exclude_unset=True))
        if fields.get("postedBy") is not None:
            fields["postedBy"] = as_object_id(fields["postedBy"])

        query = {"_id": as_object_id(tid)}
        with self._driver_errors("update", tid=tid):
            if not fields:
                # MongoDB rejects an empty $set; report the match without writing
                matched = await self.collection.count_documents(query, limit=1)
                return UpdateStatus(matched_count=matched, modified_count=0)
            result = await self.collection.update_one(query, {"$set": fields})

        logger.info(
            "Tuit %s update: matched=%d modified=%d",
            tid, result.matched_count, result.modified_count,
        )
        return UpdateStatus(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def delete_tuit(self, tid: str) -> DeleteStatus:
        """Removes the tuit `tid`; deleting a missing id reports 0, not an error."""
        with self._driver_errors("delete", tid=tid):
            result = await self.collection.delete_one({"_id": as_object_id(tid)})
        logger.info("Tuit %s delete: deleted=%d", tid, result.deleted_count)
        return DeleteStatus(deleted_count=result.deleted_count)


def get_tuit_dao(db: AsyncDatabase = Depends(get_database)) -> TuitDao:
    """FastAPI dependency: a TuitDao bound to the `tuits` collection."""
    return TuitDao(db[TUITS_COLLECTION])
