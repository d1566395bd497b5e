# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: stored user records, request identity, login credentials
# - session.py: persisted session data and flash messages
# - campground.py: campground/review documents and form input
# =============================================================================

from .campground import (
    Campground,
    CampgroundForm,
    Geometry,
    Image,
    Review,
    ReviewForm,
)
from .session import (
    FlashCategory,
    FlashMessage,
    SessionData,
)
from .user import (
    AuthUser,
    Credentials,
    UserRecord,
)

__all__ = [
    # Campground
    "Campground",
    "CampgroundForm",
    "Geometry",
    "Image",
    "Review",
    "ReviewForm",
    # Session
    "FlashCategory",
    "FlashMessage",
    "SessionData",
    # User
    "AuthUser",
    "Credentials",
    "UserRecord",
]
