# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Session-based authentication:
# - backend.py: resolves request.user from the session (Starlette backend)
# - dependencies.py: get_current_user / get_current_user_optional
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.backend import SessionAuthBackend
from app.auth.dependencies import get_current_user, get_current_user_optional
from app.auth.models import SessionUser
from core.models.user import AuthUser

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "AuthUser",
    "SessionAuthBackend",
    "SessionUser",
]
