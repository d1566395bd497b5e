# =============================================================================
# app/middleware/csp.py - Content Security Policy Header
# =============================================================================
# Adds a Content-Security-Policy header to every HTTP response. Pages load
# Bootstrap, Font Awesome and Mapbox from CDNs and images from Cloudinary
# and Unsplash; anything else is blocked by the browser.
# =============================================================================

from starlette.types import ASGIApp, Message, Receive, Scope, Send

SCRIPT_SRC_URLS = [
    "https://stackpath.bootstrapcdn.com/",
    "https://api.tiles.mapbox.com/",
    "https://api.mapbox.com/",
    "https://kit.fontawesome.com/",
    "https://cdnjs.cloudflare.com/",
    "https://cdn.jsdelivr.net",
]
STYLE_SRC_URLS = [
    "https://kit-free.fontawesome.com/",
    "https://api.mapbox.com/",
    "https://api.tiles.mapbox.com/",
    "https://fonts.googleapis.com/",
    "https://use.fontawesome.com/",
    "https://cdn.jsdelivr.net",
]
CONNECT_SRC_URLS = [
    "https://api.mapbox.com/",
    "https://a.tiles.mapbox.com/",
    "https://b.tiles.mapbox.com/",
    "https://events.mapbox.com/",
]
FONT_SRC_URLS: list[str] = []


def build_directives(cloudinary_cloud_name: str = "") -> dict[str, list[str]]:
    """The policy as directive -> sources. An empty list means 'none'."""
    img_src = ["'self'", "blob:", "data:"]
    if cloudinary_cloud_name:
        img_src.append(f"https://res.cloudinary.com/{cloudinary_cloud_name}/")
    img_src.append("https://images.unsplash.com/")

    return {
        "default-src": [],
        "connect-src": ["'self'", *CONNECT_SRC_URLS],
        "script-src": ["'unsafe-inline'", "'self'", *SCRIPT_SRC_URLS],
        "style-src": ["'self'", "'unsafe-inline'", *STYLE_SRC_URLS],
        "worker-src": ["'self'", "blob:"],
        "object-src": [],
        "img-src": img_src,
        "font-src": ["'self'", *FONT_SRC_URLS],
    }


def format_policy(directives: dict[str, list[str]]) -> str:
    parts = []
    for name, sources in directives.items():
        value = " ".join(sources) if sources else "'none'"
        parts.append(f"{name} {value}")
    return "; ".join(parts)


class ContentSecurityPolicyMiddleware:
    """Pure ASGI middleware; the header value is computed once."""

    def __init__(self, app: ASGIApp, directives: dict[str, list[str]]):
        self.app = app
        self.header_value = format_policy(directives).encode("latin-1")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_policy(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"content-security-policy", self.header_value))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_with_policy)
