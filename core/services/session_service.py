# =============================================================================
# core/services/session_service.py - Session Business Logic
# =============================================================================
# Session: the per-request session context handed to route handlers.
# SessionManager: loads sessions from a SessionStore and writes them back.
#
# Write policy (mirrors a cookie session with a server-side store):
# - new sessions are saved even when empty, so the browser gets a cookie
# - modified or rotated sessions are saved in full
# - untouched sessions only get their expiry refreshed, and at most once
#   per touch interval
# - rotating the id (login/logout) deletes the old store entry
# =============================================================================

import logging
import secrets
import time
from typing import Callable

from core.models.session import FlashCategory, FlashMessage, SessionData
from lib.session_store import SessionStore

logger = logging.getLogger(__name__)


def generate_session_id() -> str:
    return secrets.token_urlsafe(24)


def _short(session_id: str) -> str:
    return f"{session_id[:8]}..."


class Session:
    """
    One browser session for the duration of a request.

    States: anonymous (user_id is None) and authenticated. login() and
    logout() are the only transitions and both rotate the session id.
    """

    def __init__(
        self,
        session_id: str,
        data: SessionData | None = None,
        is_new: bool = False,
        expires_at: float | None = None,
    ):
        self.id = session_id
        self.data = data or SessionData()
        self.is_new = is_new
        self.expires_at = expires_at
        self.modified = False
        self.previous_id: str | None = None

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @property
    def user_id(self) -> str | None:
        return self.data.user_id

    @property
    def is_authenticated(self) -> bool:
        return self.data.user_id is not None

    def login(self, user_id: str) -> None:
        """Attach a user, replacing any previous one, under a fresh id."""
        self.regenerate()
        self.data.user_id = user_id
        self.modified = True

    def logout(self) -> None:
        """Clear the user. Safe to call on an anonymous session."""
        if self.data.user_id is None:
            return
        self.regenerate()
        self.data.user_id = None
        self.modified = True

    def regenerate(self) -> None:
        """Move the session to a new id; the old id is dropped on commit."""
        if self.previous_id is None and not self.is_new:
            self.previous_id = self.id
        self.id = generate_session_id()
        self.modified = True

    # -------------------------------------------------------------------------
    # Flash messages
    # -------------------------------------------------------------------------

    def flash(self, message: FlashMessage) -> None:
        self.data.flash.setdefault(message.category.value, []).append(message.text)
        self.modified = True

    def consume_flashes(self) -> dict[str, list[str]]:
        """Return and clear every queued message, keyed by category."""
        drained = {category.value: self.data.flash.get(category.value, []) for category in FlashCategory}
        if any(drained.values()):
            self.data.flash = {category.value: [] for category in FlashCategory}
            self.modified = True
        return drained

    # -------------------------------------------------------------------------
    # Return-to URL
    # -------------------------------------------------------------------------

    @property
    def return_to(self) -> str | None:
        return self.data.return_to

    @return_to.setter
    def return_to(self, url: str | None) -> None:
        self.data.return_to = url
        self.modified = True

    def pop_return_to(self) -> str | None:
        url = self.data.return_to
        if url is not None:
            self.data.return_to = None
            self.modified = True
        return url


class SessionManager:
    """
    Loads and commits sessions against a SessionStore.

    Args:
        store: Session backend
        ttl: Lifetime of a session in seconds
        touch_after: Minimum seconds between expiry refreshes of an
            unmodified session
        clock: Time source (epoch seconds)
    """

    def __init__(
        self,
        store: SessionStore,
        ttl: int,
        touch_after: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.ttl = ttl
        self.touch_after = touch_after
        self._clock = clock

    def new_session(self) -> Session:
        return Session(generate_session_id(), is_new=True)

    async def load(self, session_id: str | None) -> Session:
        """
        Load a session by id.

        A missing id, an unknown id, or an expired entry all produce a new
        anonymous session.
        """
        if not session_id:
            return self.new_session()

        record = await self.store.get(session_id)
        if record is None:
            logger.debug(f"Session {_short(session_id)} not found, starting a new one")
            return self.new_session()

        return Session(
            session_id,
            data=SessionData.model_validate(record.data),
            expires_at=record.expires_at,
        )

    async def commit(self, session: Session) -> bool:
        """
        Persist the session after a request.

        Returns:
            True if the cookie must be (re)sent: the session is new or its
            id changed.
        """
        if session.is_new or session.modified:
            await self.store.set(session.id, session.data.model_dump(mode="json"), self.ttl)
            if session.previous_id is not None:
                await self.store.delete(session.previous_id)
                logger.debug(f"Rotated session {_short(session.previous_id)} -> {_short(session.id)}")
            return session.is_new or session.previous_id is not None

        if self._touch_due(session):
            await self.store.touch(session.id, self.ttl)
            logger.debug(f"Touched session {_short(session.id)}")
        return False

    def _touch_due(self, session: Session) -> bool:
        if session.expires_at is None:
            return True
        last_touched = session.expires_at - self.ttl
        return self._clock() - last_touched >= self.touch_after
