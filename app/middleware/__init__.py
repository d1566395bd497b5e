# =============================================================================
# app/middleware/ - ASGI Middleware
# =============================================================================
# - session.py: signed session cookie + server-side session loading
# - csp.py: Content-Security-Policy header
# - method_override.py: ?_method=PUT|DELETE for HTML forms
#
# Order matters; see app/main.py.
# =============================================================================

from .csp import ContentSecurityPolicyMiddleware, build_directives
from .method_override import MethodOverrideMiddleware
from .session import SessionCookieSigner, SessionMiddleware

__all__ = [
    "ContentSecurityPolicyMiddleware",
    "build_directives",
    "MethodOverrideMiddleware",
    "SessionCookieSigner",
    "SessionMiddleware",
]
