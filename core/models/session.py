# =============================================================================
# core/models/session.py - Session Schemas
# =============================================================================
# These models define what is persisted for a browser session:
# - SessionData: the JSON document kept in the session store
# - FlashMessage / FlashCategory: one-time notifications queued for the
#   next rendered page
#
# A session is anonymous until a user id is attached (login/registration)
# and goes back to anonymous on logout. It never holds more than one user.
# =============================================================================

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FlashCategory(str, Enum):
    """
    Flash queues.

    Each category is its own read-once queue; templates show success
    messages and error messages in different styles.
    """
    SUCCESS = "success"
    ERROR = "error"


class FlashMessage(BaseModel):
    """
    A single flash notification.

    Example:
        FlashMessage(category=FlashCategory.SUCCESS, text="Welcome back")
    """

    model_config = ConfigDict(frozen=True)

    category: FlashCategory
    text: str

    @classmethod
    def success(cls, text: str) -> "FlashMessage":
        return cls(category=FlashCategory.SUCCESS, text=text)

    @classmethod
    def error(cls, text: str) -> "FlashMessage":
        return cls(category=FlashCategory.ERROR, text=text)


def _empty_flash() -> dict[str, list[str]]:
    return {category.value: [] for category in FlashCategory}


class SessionData(BaseModel):
    """
    Persisted session contents.

    Example:
        {
            "user_id": "641af2bb4929465a40608aa4",
            "flash": {"success": ["Welcome back"], "error": []},
            "return_to": "/campgrounds/new"
        }
    """

    # Id of the authenticated user, None while anonymous
    user_id: str | None = Field(
        default=None,
        description="Authenticated user id"
    )

    # Pending flash messages per category
    flash: dict[str, list[str]] = Field(
        default_factory=_empty_flash,
        description="Queued flash messages by category"
    )

    # URL captured by the login guard, consumed by the next login
    return_to: str | None = Field(
        default=None,
        description="Page to return to after login"
    )
