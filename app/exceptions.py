# =============================================================================
# app/exceptions.py - Custom Exceptions
# =============================================================================
# Centralized exception types for the web app.
#
# Three families:
# - Credential errors (UserValidationError, AuthenticationError): caught by
#   the user handlers and turned into an error flash.
# - FlashRedirectError: handled app-wide by queueing the message as an
#   error flash and redirecting to a safe page.
# - Everything else: rendered on the error page with its status code.
#
# The handlers that render these live in app/main.py.
# =============================================================================

from typing import Any


class YelpCampException(Exception):
    """
    Base exception for the YelpCamp app.

    `message` is safe to show to the user; internal details go in
    `details` and are only logged.
    """

    def __init__(
        self,
        message: str,
        code: str = "YELPCAMP_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dict for logging or JSON responses."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Credential Exceptions
# =============================================================================

class UserValidationError(YelpCampException):
    """Raised when registration data is missing a required field."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="USER_VALIDATION_ERROR",
            status_code=400,
            details={"field": field} if field else None,
        )


class DuplicateUserError(UserValidationError):
    """Raised when a username or email is already registered."""

    def __init__(self, field: str):
        super().__init__(
            message=f"A user with the given {field} is already registered",
            field=field,
        )
        self.code = "DUPLICATE_USER"


class AuthenticationError(YelpCampException):
    """Raised when a username/password pair does not verify."""

    def __init__(self, message: str = "Password or username is incorrect"):
        super().__init__(
            message=message,
            code="AUTHENTICATION_FAILED",
            status_code=401,
        )


# =============================================================================
# Flash + Redirect Exceptions
# =============================================================================

class FlashRedirectError(YelpCampException):
    """
    An error the user recovers from on another page.

    The app handler queues `message` as an error flash and redirects to
    `redirect_to`.
    """

    def __init__(self, message: str, redirect_to: str, code: str = "FLASH_REDIRECT"):
        super().__init__(message=message, code=code, status_code=302)
        self.redirect_to = redirect_to


class LoginRequiredError(FlashRedirectError):
    """Raised by the login guard for anonymous requests."""

    def __init__(self):
        super().__init__(
            message="You must be signed in first!",
            redirect_to="/login",
            code="LOGIN_REQUIRED",
        )


class PermissionDeniedError(FlashRedirectError):
    """Raised when a user touches content they did not author."""

    def __init__(self, redirect_to: str):
        super().__init__(
            message="You do not have permission to do that!",
            redirect_to=redirect_to,
            code="PERMISSION_DENIED",
        )


class CampgroundNotFoundError(FlashRedirectError):
    """Raised when a campground ID doesn't exist."""

    def __init__(self, campground_id: str):
        super().__init__(
            message="Cannot find that campground!",
            redirect_to="/campgrounds",
            code="CAMPGROUND_NOT_FOUND",
        )
        self.details = {"campground_id": campground_id}


class ReviewNotFoundError(FlashRedirectError):
    """Raised when a review ID doesn't exist on the campground."""

    def __init__(self, campground_id: str, review_id: str):
        super().__init__(
            message="Cannot find that review!",
            redirect_to=f"/campgrounds/{campground_id}",
            code="REVIEW_NOT_FOUND",
        )
        self.details = {"campground_id": campground_id, "review_id": review_id}


# =============================================================================
# Page Errors
# =============================================================================

class NotFoundError(YelpCampException):
    """Raised for unmatched routes."""

    def __init__(self, message: str = "Page not found"):
        super().__init__(message=message, code="NOT_FOUND", status_code=404)


DEFAULT_ERROR_MESSAGE = "Oh no, Something went wrong."
