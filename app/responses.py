# =============================================================================
# app/responses.py - Handler Outcomes
# =============================================================================
# Handlers that end in a redirect return a Redirect value: where to go and
# which flash message (if any) to show there. Applying it to the session
# queues the flash and builds the HTTP response, so handlers never touch
# the flash queues directly.
#
# Usage:
#   return Redirect("/campgrounds", FlashMessage.success("Welcome back")).apply(session)
# =============================================================================

from dataclasses import dataclass

from fastapi.responses import RedirectResponse

from core.models.session import FlashMessage
from core.services.session_service import Session

REDIRECT_STATUS = 302


@dataclass(frozen=True)
class Redirect:
    url: str
    flash: FlashMessage | None = None

    def apply(self, session: Session) -> RedirectResponse:
        if self.flash is not None:
            session.flash(self.flash)
        return RedirectResponse(self.url, status_code=REDIRECT_STATUS)
