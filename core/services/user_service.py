# =============================================================================
# core/services/user_service.py - User Records and Credential Hashing
# =============================================================================
# Registers users, verifies passwords, and loads the identity for a session.
# Passwords are hashed with PBKDF2-SHA256 (random salt per user) through
# passlib; only the hash is stored.
# =============================================================================

import logging
from typing import Iterable

from passlib.context import CryptContext
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from app.exceptions import AuthenticationError, DuplicateUserError, UserValidationError
from core.models.user import AuthUser, UserRecord
from lib.mongo_client import USERS, parse_object_id

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    return pwd_context.verify(plain_password, password_hash)


class UserService:
    """
    Service for user records.

    Provides a clean interface between route handlers and the "users"
    collection.
    """

    def __init__(self, database: AsyncDatabase):
        self._users = database[USERS]

    async def register(self, email: str, username: str, password: str) -> AuthUser:
        """
        Create a user with a hashed password.

        Args:
            email: Unique email address
            username: Unique login name
            password: Plaintext password (hashed before storage)

        Returns:
            AuthUser for the new record

        Raises:
            UserValidationError: If a field is empty
            DuplicateUserError: If the username or email is taken
        """
        username = (username or "").strip()
        email = (email or "").strip()

        if not username:
            raise UserValidationError("No username was given", field="username")
        if not email:
            raise UserValidationError("No email was given", field="email")
        if not password:
            raise UserValidationError("No password was given", field="password")

        if await self._users.find_one({"username": username}) is not None:
            raise DuplicateUserError("username")
        if await self._users.find_one({"email": email}) is not None:
            raise DuplicateUserError("email")

        doc = {
            "email": email,
            "username": username,
            "password_hash": hash_password(password),
        }

        try:
            result = await self._users.insert_one(doc)
        except DuplicateKeyError as e:
            # Lost a race with a concurrent registration; the unique index decides
            key_pattern = (e.details or {}).get("keyPattern") or {}
            raise DuplicateUserError("email" if "email" in key_pattern else "username") from e

        logger.info(f"Registered user: {username}")
        return AuthUser(id=str(result.inserted_id), email=email, username=username)

    async def authenticate(self, username: str, password: str) -> AuthUser:
        """
        Verify a username/password pair.

        The same message is used for an unknown username and a wrong
        password.

        Raises:
            AuthenticationError: If the credentials don't match a user
        """
        doc = await self._users.find_one({"username": (username or "").strip()})
        if doc is None:
            logger.debug("Login attempt for unknown username")
            raise AuthenticationError()

        record = UserRecord.from_document(doc)
        if not verify_password(password or "", record.password_hash):
            logger.debug(f"Wrong password for user: {record.username}")
            raise AuthenticationError()

        return record.to_auth_user()

    async def get_user(self, user_id: str) -> AuthUser | None:
        """Load the identity for a session's user id, None if it's gone."""
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        doc = await self._users.find_one({"_id": oid})
        if doc is None:
            return None
        return UserRecord.from_document(doc).to_auth_user()

    async def get_usernames(self, user_ids: Iterable[str]) -> dict[str, str]:
        """Map user ids to usernames, for showing authors."""
        oids = [oid for oid in (parse_object_id(u) for u in set(user_ids)) if oid is not None]
        if not oids:
            return {}
        docs = await self._users.find({"_id": {"$in": oids}}).to_list(length=None)
        return {str(doc["_id"]): doc.get("username", "") for doc in docs}
