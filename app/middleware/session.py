# =============================================================================
# app/middleware/session.py - Cookie-Backed Session Middleware
# =============================================================================
# For every HTTP request:
# 1. Read the session cookie and verify its signature
# 2. Load the session from the store (or start a new anonymous one)
# 3. Expose it as request.state.session for the auth backend and handlers
# 4. After the handler, commit it and (re)send the cookie when needed
#
# The cookie carries only the signed session id (an HS256 JWS); all data
# stays server-side. A cookie that fails verification is ignored.
# =============================================================================

import logging

from jose import jws
from jose.exceptions import JWSError
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from core.services.session_service import SessionManager

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class SessionCookieSigner:
    """Signs session ids so clients can't forge or guess them."""

    def __init__(self, secret: str):
        self._secret = secret

    def sign(self, session_id: str) -> str:
        return jws.sign(session_id.encode(), self._secret, algorithm=ALGORITHM)

    def unsign(self, value: str) -> str | None:
        """Return the session id, or None if the signature doesn't verify."""
        try:
            return jws.verify(value, self._secret, algorithms=[ALGORITHM]).decode()
        except (JWSError, UnicodeDecodeError):
            logger.warning("Ignoring session cookie with an invalid signature")
            return None


class SessionMiddleware(BaseHTTPMiddleware):
    """
    Attaches a Session to each request.

    The SessionManager is read from app.state.session_manager, which the
    application lifespan sets up.
    """

    def __init__(
        self,
        app: ASGIApp,
        secret: str,
        cookie_name: str = "session",
        max_age: int = 7 * 24 * 3600,
        https_only: bool = False,
    ):
        super().__init__(app)
        self.signer = SessionCookieSigner(secret)
        self.cookie_name = cookie_name
        self.max_age = max_age
        self.https_only = https_only

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        manager: SessionManager = request.app.state.session_manager

        raw_cookie = request.cookies.get(self.cookie_name)
        session_id = self.signer.unsign(raw_cookie) if raw_cookie else None
        session = await manager.load(session_id)
        request.state.session = session

        response = await call_next(request)

        if await manager.commit(session):
            response.set_cookie(
                self.cookie_name,
                self.signer.sign(session.id),
                max_age=self.max_age,
                expires=self.max_age,
                path="/",
                httponly=True,
                secure=self.https_only,
                samesite="lax",
            )
        return response
