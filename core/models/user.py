# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# - UserRecord: a user document as stored (includes the password hash)
# - AuthUser: the identity attached to a request (never carries the hash)
# - Credentials: username/password pair handed to an auth strategy
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    A user document from the "users" collection.

    The hash is excluded from repr() so it can't leak through logging.
    """

    id: str = Field(..., description="User id (MongoDB ObjectId as hex)")
    email: str
    username: str
    password_hash: str = Field(..., repr=False)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "UserRecord":
        """Create from a raw MongoDB document."""
        return cls(
            id=str(doc["_id"]),
            email=doc.get("email", ""),
            username=doc.get("username", ""),
            password_hash=doc.get("password_hash", ""),
        )

    def to_auth_user(self) -> "AuthUser":
        return AuthUser(id=self.id, email=self.email, username=self.username)


class AuthUser(BaseModel):
    """
    Authenticated user attached to a request.

    This is all a handler or template ever sees of a user.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    email: str
    username: str


class Credentials(BaseModel):
    """Login form input."""

    username: str = ""
    password: str = Field(default="", repr=False)
