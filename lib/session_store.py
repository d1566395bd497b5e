# =============================================================================
# lib/session_store.py - Server-Side Session Storage
# =============================================================================
# Key-value storage for session data, keyed by session id, with a TTL.
# The session manager (core/services/session_service.py) only talks to the
# SessionStore interface:
#
#   get(sid)              -> SessionRecord | None   (None if missing/expired)
#   set(sid, data, ttl)   -> None                   (full write, resets expiry)
#   delete(sid)           -> None                   (no error if missing)
#   touch(sid, ttl)       -> None                   (resets expiry only)
#
# Backends:
# - MongoSessionStore: "sessions" collection, TTL index on "expires"
# - RedisSessionStore: one JSON string per key, native key expiry
# - MemorySessionStore: process-local dict, for development and tests
#
# Usage:
#   store = create_session_store(settings, database=db)
# =============================================================================

from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import redis.asyncio as aioredis
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError

from lib.mongo_client import SESSIONS

logger = logging.getLogger(__name__)


class SessionStoreError(Exception):
    """Raised when the session backend cannot be read or written."""

    def __init__(self, message: str, backend: str):
        super().__init__(f"[{backend}] {message}")
        self.message = message
        self.backend = backend


@dataclass(frozen=True)
class SessionRecord:
    """Stored session data plus its absolute expiry (epoch seconds)."""
    data: dict[str, Any]
    expires_at: float


class SessionStore(ABC):
    """Interface every session backend implements."""

    name = "abstract"

    @abstractmethod
    async def get(self, session_id: str) -> SessionRecord | None:
        ...

    @abstractmethod
    async def set(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        ...

    @abstractmethod
    async def touch(self, session_id: str, ttl: int) -> None:
        ...

    async def close(self) -> None:
        """Release backend resources. Most backends hold none of their own."""


# =============================================================================
# In-Memory Backend
# =============================================================================

class MemorySessionStore(SessionStore):
    """
    Dict-backed store. Data is lost on restart and not shared between
    worker processes. Expired records are swept on every write.
    """

    name = "memory"

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._records: dict[str, SessionRecord] = {}

    async def get(self, session_id: str) -> SessionRecord | None:
        record = self._records.get(session_id)
        if record is None:
            return None
        if record.expires_at <= self._clock():
            del self._records[session_id]
            return None
        return record

    async def set(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        self._sweep()
        # json round trip keeps stored data detached from the caller's dict
        self._records[session_id] = SessionRecord(
            data=json.loads(json.dumps(data)),
            expires_at=self._clock() + ttl,
        )

    async def delete(self, session_id: str) -> None:
        self._records.pop(session_id, None)

    async def touch(self, session_id: str, ttl: int) -> None:
        record = self._records.get(session_id)
        if record is not None:
            self._records[session_id] = SessionRecord(
                data=record.data,
                expires_at=self._clock() + ttl,
            )

    def _sweep(self) -> None:
        now = self._clock()
        expired = [sid for sid, record in self._records.items() if record.expires_at <= now]
        for sid in expired:
            del self._records[sid]

    def __len__(self) -> int:
        return len(self._records)


# =============================================================================
# MongoDB Backend
# =============================================================================

class MongoSessionStore(SessionStore):
    """
    Sessions as documents: {_id: sid, session: {...}, expires: datetime}.

    The TTL index created by DocumentStore.ensure_indexes lets MongoDB
    purge expired documents; reads also filter on expiry because the TTL
    monitor only runs once a minute.
    """

    name = "mongo"

    def __init__(self, database: AsyncDatabase, collection: str = SESSIONS):
        self._collection = database[collection]

    @staticmethod
    def _expiry(ttl: int) -> datetime:
        return datetime.now(timezone.utc) + timedelta(seconds=ttl)

    async def get(self, session_id: str) -> SessionRecord | None:
        try:
            doc = await self._collection.find_one(
                {"_id": session_id, "expires": {"$gt": datetime.now(timezone.utc)}}
            )
        except PyMongoError as e:
            raise SessionStoreError(f"Failed to load session: {e}", self.name) from e
        if doc is None:
            return None
        return SessionRecord(data=doc.get("session") or {}, expires_at=doc["expires"].timestamp())

    async def set(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        try:
            await self._collection.replace_one(
                {"_id": session_id},
                {"_id": session_id, "session": data, "expires": self._expiry(ttl)},
                upsert=True,
            )
        except PyMongoError as e:
            raise SessionStoreError(f"Failed to save session: {e}", self.name) from e

    async def delete(self, session_id: str) -> None:
        try:
            await self._collection.delete_one({"_id": session_id})
        except PyMongoError as e:
            raise SessionStoreError(f"Failed to delete session: {e}", self.name) from e

    async def touch(self, session_id: str, ttl: int) -> None:
        try:
            await self._collection.update_one(
                {"_id": session_id},
                {"$set": {"expires": self._expiry(ttl)}},
            )
        except PyMongoError as e:
            raise SessionStoreError(f"Failed to touch session: {e}", self.name) from e


# =============================================================================
# Redis Backend
# =============================================================================

class RedisSessionStore(SessionStore):
    """Sessions as JSON strings under "sess:<sid>" with native expiry."""

    name = "redis"

    def __init__(self, client: aioredis.Redis, prefix: str = "sess:"):
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str) -> "RedisSessionStore":
        return cls(aioredis.from_url(url))

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    async def get(self, session_id: str) -> SessionRecord | None:
        try:
            async with self._client.pipeline(transaction=False) as pipe:
                pipe.get(self._key(session_id))
                pipe.ttl(self._key(session_id))
                raw, ttl = await pipe.execute()
        except RedisError as e:
            raise SessionStoreError(f"Failed to load session: {e}", self.name) from e
        if raw is None or ttl is None or ttl < 0:
            return None
        return SessionRecord(data=json.loads(raw), expires_at=time.time() + ttl)

    async def set(self, session_id: str, data: dict[str, Any], ttl: int) -> None:
        try:
            await self._client.set(self._key(session_id), json.dumps(data), ex=ttl)
        except RedisError as e:
            raise SessionStoreError(f"Failed to save session: {e}", self.name) from e

    async def delete(self, session_id: str) -> None:
        try:
            await self._client.delete(self._key(session_id))
        except RedisError as e:
            raise SessionStoreError(f"Failed to delete session: {e}", self.name) from e

    async def touch(self, session_id: str, ttl: int) -> None:
        try:
            await self._client.expire(self._key(session_id), ttl)
        except RedisError as e:
            raise SessionStoreError(f"Failed to touch session: {e}", self.name) from e

    async def close(self) -> None:
        await self._client.aclose()


def create_session_store(settings, database: AsyncDatabase | None = None) -> SessionStore:
    """
    Build the backend named by settings.SESSION_BACKEND.

    The mongo backend shares the app's database handle.
    """
    backend = settings.SESSION_BACKEND
    if backend == "memory":
        store: SessionStore = MemorySessionStore()
    elif backend == "redis":
        store = RedisSessionStore.from_url(settings.REDIS_URL)
    else:
        if database is None:
            raise ValueError("The mongo session backend needs a database handle")
        store = MongoSessionStore(database)
    logger.info(f"Using {store.name} session store")
    return store
