# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Usage:
#   from app.auth import get_current_user
#
#   @router.get("/campgrounds/new")
#   async def new_form(user: AuthUser = Depends(get_current_user)):
#       ...
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends, Request

from app.dependencies import SessionDep
from app.exceptions import LoginRequiredError
from core.models.user import AuthUser

logger = logging.getLogger(__name__)


async def get_current_user_optional(request: Request) -> Optional[AuthUser]:
    """
    Get the signed-in user, or None for anonymous requests.

    The identity was resolved by SessionAuthBackend before routing.
    """
    user = request.scope.get("user")
    if user is None or not user.is_authenticated:
        return None
    return user.user


async def get_current_user(
    request: Request,
    session: SessionDep,
    user: Optional[AuthUser] = Depends(get_current_user_optional),
) -> AuthUser:
    """
    Require a signed-in user.

    For anonymous requests the current URL is saved as the session's
    return-to target, so login can send the user back here.

    Raises:
        LoginRequiredError: Handled app-wide (error flash + redirect to /login)
    """
    if user is not None:
        return user

    # Only pages a browser can land on again are worth returning to
    if request.method == "GET":
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        session.return_to = url
    logger.debug(f"Anonymous {request.method} {request.url.path} sent to login")
    raise LoginRequiredError()
