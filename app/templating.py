# =============================================================================
# app/templating.py - Jinja2 Page Rendering
# =============================================================================
# render() is the only way pages are produced. It drains the session's
# flash queues into the page, so each message shows up exactly once.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _current_user(request: Request):
    user = request.scope.get("user")
    if user is None or not user.is_authenticated:
        return None
    return user.user


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """
    Render a template with the common page context.

    Every page gets:
    - current_user: the signed-in AuthUser or None
    - success / error: flash messages queued since the last page
    """
    session = getattr(request.state, "session", None)
    flashes = session.consume_flashes() if session is not None else {}

    page_context = {
        "current_user": _current_user(request),
        "success": flashes.get("success", []),
        "error": flashes.get("error", []),
        **(context or {}),
    }
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)
