# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - middleware/: sessions, Content-Security-Policy, method override
# - auth/: request identity and the login guard
# - routers/: page handlers organized by feature
# - templates/: Jinja2 pages
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
