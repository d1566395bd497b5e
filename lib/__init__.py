# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable building blocks:
# - mongo_client.py: shared async MongoDB client, collection names, indexes
# - session_store.py: session backends (MongoDB, Redis, in-memory)
# - seed_data.py: word and city lists for sample campgrounds
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.mongo_client import DocumentStore, DocumentStoreError, parse_object_id
from lib.session_store import (
    MemorySessionStore,
    MongoSessionStore,
    RedisSessionStore,
    SessionRecord,
    SessionStore,
    SessionStoreError,
    create_session_store,
)

__all__ = [
    # MongoDB
    "DocumentStore",
    "DocumentStoreError",
    "parse_object_id",
    # Sessions
    "MemorySessionStore",
    "MongoSessionStore",
    "RedisSessionStore",
    "SessionRecord",
    "SessionStore",
    "SessionStoreError",
    "create_session_store",
]
