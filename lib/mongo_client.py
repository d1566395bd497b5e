# =============================================================================
# lib/mongo_client.py - MongoDB Client Wrapper
# =============================================================================
# This module owns the single async MongoDB client used by the app and the
# seed script. The database name comes from the path of DB_URL
# (mongodb://host:27017/YelpCamp -> "YelpCamp").
#
# Usage:
#   from lib.mongo_client import DocumentStore
#   db = DocumentStore.get_database()
#   await DocumentStore.ensure_indexes(db)
#   ...
#   await DocumentStore.close()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from app.config import settings

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "YelpCamp"

# Collection names
USERS = "users"
CAMPGROUNDS = "campgrounds"
REVIEWS = "reviews"
SESSIONS = "sessions"


def parse_object_id(value: str | ObjectId | None) -> ObjectId | None:
    """Turn a path/session id into an ObjectId, None if it isn't one."""
    if isinstance(value, ObjectId):
        return value
    if value and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


class DocumentStoreError(Exception):
    """
    Error during MongoDB operations.

    Carries a suggestion telling the operator how to fix the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "DOCUMENT_STORE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class DocumentStore:
    """
    Shared MongoDB client.

    One AsyncMongoClient per process; all methods are class methods so
    callers never construct this class.
    """

    _client: AsyncMongoClient | None = None

    @classmethod
    def get_client(cls, url: str | None = None) -> AsyncMongoClient:
        """
        Get or create the shared client.

        The client connects lazily, so a bad host only surfaces on the
        first operation.
        """
        if cls._client is None:
            try:
                cls._client = AsyncMongoClient(url or settings.DB_URL, tz_aware=True)
            except PyMongoError as e:
                raise DocumentStoreError(
                    message=f"Failed to create MongoDB client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check DB_URL in your .env file",
                ) from e
            logger.info("MongoDB client initialized")
        return cls._client

    @classmethod
    def get_database(cls, url: str | None = None) -> AsyncDatabase:
        """Get the database named in DB_URL (YelpCamp when the URL has none)."""
        return cls.get_client(url).get_default_database(default=DEFAULT_DATABASE)

    @classmethod
    async def ping(cls, db: AsyncDatabase) -> None:
        """Round-trip to the server; raises DocumentStoreError if unreachable."""
        try:
            await db.command("ping")
        except PyMongoError as e:
            raise DocumentStoreError(
                message=f"MongoDB is unreachable: {e}",
                code="PING_FAILED",
                suggestion="Make sure mongod is running and DB_URL points at it",
            ) from e

    @classmethod
    async def ensure_indexes(cls, db: AsyncDatabase) -> None:
        """
        Create the indexes the app relies on.

        - users.username / users.email: unique, backing registration checks
        - sessions.expires: TTL index so the server drops stale sessions
        """
        try:
            await db[USERS].create_index([("username", ASCENDING)], unique=True)
            await db[USERS].create_index([("email", ASCENDING)], unique=True)
            await db[SESSIONS].create_index("expires", expireAfterSeconds=0)
        except PyMongoError as e:
            raise DocumentStoreError(
                message=f"Failed to create indexes: {e}",
                code="INDEX_CREATION_FAILED",
                suggestion="Remove duplicate users before enabling unique indexes",
            ) from e
        logger.debug("MongoDB indexes ensured")

    @classmethod
    async def close(cls) -> None:
        """Close the shared client (no-op if it was never opened)."""
        if cls._client is not None:
            await cls._client.close()
            cls._client = None
            logger.info("MongoDB connection closed")
