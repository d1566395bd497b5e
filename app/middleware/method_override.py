# =============================================================================
# app/middleware/method_override.py - HTML Form Method Override
# =============================================================================
# HTML forms can only GET or POST. A POST to "...?_method=PUT" (or DELETE,
# PATCH) is routed as that method instead.
# =============================================================================

from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send

ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    def __init__(self, app: ASGIApp, param: str = "_method"):
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            override = (query.get(self.param) or [""])[0].upper()
            if override in ALLOWED_METHODS:
                scope = dict(scope, method=override)
        await self.app(scope, receive, send)
