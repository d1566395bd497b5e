# =============================================================================
# tests/helpers.py - Shared Test Helpers
# =============================================================================

import re

from fastapi.testclient import TestClient

from app.config import settings
from app.middleware.session import SessionCookieSigner
from lib.session_store import MemorySessionStore


def flash_messages(html: str, category: str) -> list[str]:
    """Flash messages of one category rendered on a page."""
    pattern = rf'data-flash="{category}">(.*?)</div>'
    return re.findall(pattern, html)


def session_id_of(client: TestClient) -> str | None:
    cookie = client.cookies.get(settings.SESSION_COOKIE_NAME)
    if cookie is None:
        return None
    return SessionCookieSigner(settings.SECRET).unsign(cookie)


def stored_session(client: TestClient, store: MemorySessionStore) -> dict | None:
    """Session data the store holds for the client's current cookie."""
    record = store._records.get(session_id_of(client) or "")
    return record.data if record else None
