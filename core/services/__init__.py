# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .auth_strategy import AuthStrategy, LocalStrategy
from .campground_service import CampgroundService
from .review_service import ReviewService
from .session_service import Session, SessionManager
from .user_service import UserService

__all__ = [
    "AuthStrategy",
    "LocalStrategy",
    "CampgroundService",
    "ReviewService",
    "Session",
    "SessionManager",
    "UserService",
]
