# =============================================================================
# app/auth/backend.py - Session Authentication Backend
# =============================================================================
# Resolves the identity for a request from its session: if the session
# holds a user id and that user still exists, request.user is a
# SessionUser; otherwise it is Starlette's UnauthenticatedUser.
#
# Runs inside SessionMiddleware, which must have set request.state.session.
# =============================================================================

import logging

from starlette.authentication import AuthCredentials, AuthenticationBackend
from starlette.requests import HTTPConnection

from app.auth.models import SessionUser
from core.services.user_service import UserService

logger = logging.getLogger(__name__)


class SessionAuthBackend(AuthenticationBackend):
    async def authenticate(self, conn: HTTPConnection) -> tuple[AuthCredentials, SessionUser] | None:
        session = conn.state.session
        if not session.is_authenticated:
            return None

        user = await UserService(conn.app.state.database).get_user(session.user_id)
        if user is None:
            # The account behind this session is gone; fall back to anonymous
            logger.info("Session user no longer exists, clearing identity")
            session.logout()
            return None

        return AuthCredentials(["authenticated"]), SessionUser(user)
