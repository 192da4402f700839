"""
Tuiter Backend — Database Client Management
=============================================

What:  Async MongoDB client, database dependency, index bootstrap and shutdown.
Why:   Centralizes all connection logic in one place.
How:   Creates one PyMongo AsyncMongoClient per process (it owns the
       connection pool) and hands the database to route dependencies.
Who:   Used by DAO dependencies (tuiter.daos) and by the app lifespan.
When:  Client is created at module import; nothing connects until the
       first operation.

Connection Pooling:
    maxPoolSize:              Upper bound on concurrent sockets (settings.db_max_pool_size)
    serverSelectionTimeoutMS: How long a call waits for a usable server
    tz_aware=True:            Datetimes come back as UTC-aware, matching what we store
    connect=False:            No I/O until the first operation (safe at import time)
"""

import logging
from typing import Any, Union

from bson import ObjectId
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from tuiter.config import settings

logger = logging.getLogger(__name__)

TUITS_COLLECTION = "tuits"
USERS_COLLECTION = "users"


# ── Client Configuration ──────────────────────────────────────────────────
client: AsyncMongoClient = AsyncMongoClient(
    settings.mongodb_url,
    maxPoolSize=settings.db_max_pool_size,
    serverSelectionTimeoutMS=settings.db_server_selection_timeout_ms,
    tz_aware=True,
    connect=False,
)


def get_database() -> AsyncDatabase:
    """
    FastAPI dependency that provides the application database.

    The client is shared; no per-request session is opened because every
    DAO method is a single, self-contained operation.

    Example usage in a dependency:
        def get_tuit_dao(db: AsyncDatabase = Depends(get_database)) -> TuitDao:
            return TuitDao(db[TUITS_COLLECTION])
    """
    return client[settings.mongodb_database]


def as_object_id(value: Any) -> Union[ObjectId, Any]:
    """
    Converts a 24-hex string into an ObjectId, leaving anything else as is.

    Applied to every `_id` lookup and every `postedBy` read and write, so a
    reference is always stored and queried in the same form. A malformed id
    stays a plain string and simply matches nothing.
    """
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def ensure_indexes(db: AsyncDatabase) -> None:
    """
    Creates the secondary indexes the DAOs query on.

    tuits.postedBy:  GET /users/{uid}/tuits
    users.username:  username lookups and bulk deletes

    create_index is idempotent, so this runs on every startup.
    """
    await db[TUITS_COLLECTION].create_index([("postedBy", ASCENDING)], name="idx_tuits_posted_by")
    await db[USERS_COLLECTION].create_index([("username", ASCENDING)], name="idx_users_username")
    logger.info("Indexes ensured on '%s' and '%s'", TUITS_COLLECTION, USERS_COLLECTION)


async def ping(db: AsyncDatabase) -> None:
    """Round-trips a `ping` command; raises if the server is unreachable."""
    await db.command("ping")


async def close_client() -> None:
    """
    What:  Closes all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    await client.close()
