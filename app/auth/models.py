# =============================================================================
# app/auth/models.py - Request User
# =============================================================================
# Starlette's AuthenticationMiddleware puts a BaseUser on request.user.
# SessionUser wraps the AuthUser loaded from the session.
# =============================================================================

from starlette.authentication import BaseUser

from core.models.user import AuthUser


class SessionUser(BaseUser):
    """Authenticated request user."""

    def __init__(self, user: AuthUser):
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def display_name(self) -> str:
        return self.user.username

    @property
    def identity(self) -> str:
        return self.user.id
