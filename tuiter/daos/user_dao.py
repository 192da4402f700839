"""
Tuiter Backend — User DAO
===========================

What:  Data access for the `users` collection.
Who:   Called by the user route handlers (tuiter.routes.users).

Every method is a direct pass-through to a single collection call: no
batching, no retries, no hashing of credentials. Deleting users leaves
their tuits in place.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from tuiter.daos.base import BaseDao
from tuiter.database import USERS_COLLECTION, as_object_id, get_database
from tuiter.models.user import User
from tuiter.schemas.common import DeleteStatus, UpdateStatus
from tuiter.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserDao(BaseDao):
    """Storage operations for users."""

    resource = "user"

    async def find_all_users(self) -> List[User]:
        with self._driver_errors("find"):
            docs = await self.collection.find({}).to_list()
        return [User.model_validate(doc) for doc in docs]

    async def find_user_by_id(self, uid: str) -> Optional[User]:
        with self._driver_errors("find", uid=uid):
            doc = await self.collection.find_one({"_id": as_object_id(uid)})
        return User.model_validate(doc) if doc is not None else None

    async def create_user(self, payload: UserCreate) -> User:
        """
        Inserts the supplied user with schema defaults applied
        (accountType, maritalStatus, salary, joined).

        Raises:
            ValidationError: username or password missing/empty
        """
        user = self._build(User, payload.model_dump(by_alias=True, exclude_unset=True))
        doc = user.to_document()
        with self._driver_errors("create", username=user.username):
            result = await self.collection.insert_one(doc)

        doc["_id"] = result.inserted_id
        logger.info("User %s created (%s)", result.inserted_id, user.username)
        return User.model_validate(doc)

    async def delete_user(self, uid: str) -> DeleteStatus:
        with self._driver_errors("delete", uid=uid):
            result = await self.collection.delete_one({"_id": as_object_id(uid)})
        logger.info("User %s delete: deleted=%d", uid, result.deleted_count)
        return DeleteStatus(deleted_count=result.deleted_count)

    async def update_user(self, uid: str, payload: UserUpdate) -> UpdateStatus:
        """
        `$set`s the supplied fields; a supplied `location` replaces the stored one.

        Raises:
            ValidationError: an empty username or password, or a null enum
        """
        fields = self._build_update(User, payload.model_dump(exclude_unset=True))
        query = {"_id": as_object_id(uid)}
        with self._driver_errors("update", uid=uid):
            if not fields:
                matched = await self.collection.count_documents(query, limit=1)
                return UpdateStatus(matched_count=matched, modified_count=0)
            result = await self.collection.update_one(query, {"$set": fields})

        logger.info(
            "User %s update: matched=%d modified=%d",
            uid, result.matched_count, result.modified_count,
        )
        return UpdateStatus(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        )

    async def delete_all_users(self) -> DeleteStatus:
        """Unconditional bulk delete of the whole collection."""
        with self._driver_errors("delete"):
            result = await self.collection.delete_many({})
        logger.warning("All users deleted: deleted=%d", result.deleted_count)
        return DeleteStatus(deleted_count=result.deleted_count)

    async def delete_users_by_username(self, username: str) -> DeleteStatus:
        """Deletes every user with this username (usernames are not unique)."""
        with self._driver_errors("delete", username=username):
            result = await self.collection.delete_many({"username": username})
        logger.info("Users named %s delete: deleted=%d", username, result.deleted_count)
        return DeleteStatus(deleted_count=result.deleted_count)

    async def find_user_by_credentials(self, username: str, password: str) -> Optional[User]:
        """First user whose username and password both match exactly, or None."""
        with self._driver_errors("find", username=username):
            doc = await self.collection.find_one({"username": username, "password": password})
        return User.model_validate(doc) if doc is not None else None

    async def find_user_by_username(self, username: str) -> Optional[User]:
        with self._driver_errors("find", username=username):
            doc = await self.collection.find_one({"username": username})
        return User.model_validate(doc) if doc is not None else None


def get_user_dao(db: AsyncDatabase = Depends(get_database)) -> UserDao:
    """FastAPI dependency: a UserDao bound to the `users` collection."""
    return UserDao(db[USERS_COLLECTION])
