# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the YelpCamp web app.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main            (binds HOST:PORT from settings)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from pymongo.asynchronous.database import AsyncDatabase
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.authentication import AuthenticationMiddleware

from app.auth import SessionAuthBackend
from app.config import Settings, settings
from app.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    FlashRedirectError,
    NotFoundError,
    YelpCampException,
)
from app.middleware import (
    ContentSecurityPolicyMiddleware,
    MethodOverrideMiddleware,
    SessionMiddleware,
    build_directives,
)
from app.responses import REDIRECT_STATUS
from app.routers import campgrounds, health, reviews, users
from app.templating import render
from core.models.session import FlashMessage
from core.services.session_service import SessionManager
from lib.mongo_client import DocumentStore, DocumentStoreError
from lib.session_store import SessionStore, create_session_store

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _session_manager(store: SessionStore, config: Settings) -> SessionManager:
    return SessionManager(
        store,
        ttl=config.SESSION_MAX_AGE_SECONDS,
        touch_after=config.SESSION_TOUCH_AFTER_SECONDS,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: connect to MongoDB (unless a database was injected), ensure
      indexes, build the session store
    - Shutdown: close whatever startup opened
    """
    config: Settings = app.state.settings
    logger.info(f"Starting YelpCamp in {config.ENVIRONMENT} mode")

    owns_database = app.state.database is None
    if owns_database:
        app.state.database = DocumentStore.get_database(config.DB_URL)

    try:
        await DocumentStore.ping(app.state.database)
        await DocumentStore.ensure_indexes(app.state.database)
        logger.info("Database connected")
    except DocumentStoreError as e:
        # Keep serving; requests that need the database will fail on their own
        logger.error(f"Database connection error: {e}")

    owns_store = app.state.session_manager is None
    if owns_store:
        store = create_session_store(config, database=app.state.database)
        app.state.session_manager = _session_manager(store, config)

    yield

    logger.info("Shutting down YelpCamp")
    if owns_store:
        await app.state.session_manager.store.close()
        app.state.session_manager = None
    if owns_database:
        await DocumentStore.close()
        app.state.database = None


def create_app(
    config: Settings | None = None,
    database: AsyncDatabase | None = None,
    session_store: SessionStore | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use (defaults to the global settings)
        database: Pre-built database handle; skips connecting to DB_URL
        session_store: Pre-built session backend; skips SESSION_BACKEND
    """
    config = config or settings

    app = FastAPI(
        title="YelpCamp",
        version=health.VERSION,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.database = database
    app.state.session_manager = (
        _session_manager(session_store, config) if session_store is not None else None
    )

    # =========================================================================
    # Middleware (last added runs first)
    # =========================================================================

    # Identity from the session; needs request.state.session
    app.add_middleware(AuthenticationMiddleware, backend=SessionAuthBackend())

    app.add_middleware(
        SessionMiddleware,
        secret=config.SECRET,
        cookie_name=config.SESSION_COOKIE_NAME,
        max_age=config.SESSION_MAX_AGE_SECONDS,
        https_only=config.COOKIE_SECURE,
    )

    app.add_middleware(
        ContentSecurityPolicyMiddleware,
        directives=build_directives(config.CLOUDINARY_CLOUD_NAME),
    )

    # Must see the request before routing
    app.add_middleware(MethodOverrideMiddleware)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    @app.exception_handler(FlashRedirectError)
    async def handle_flash_redirect(request: Request, exc: FlashRedirectError):
        """Show the message on the page the user is sent to."""
        session = getattr(request.state, "session", None)
        if session is not None:
            session.flash(FlashMessage.error(exc.message))
        return RedirectResponse(exc.redirect_to, status_code=REDIRECT_STATUS)

    @app.exception_handler(YelpCampException)
    async def handle_yelpcamp_exception(request: Request, exc: YelpCampException):
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.to_dict()}")
        return render(request, "error.html", {"err": exc}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Unmatched routes become a 404 page."""
        if exc.status_code == 404:
            err = NotFoundError()
        else:
            err = YelpCampException(str(exc.detail), code="HTTP_ERROR", status_code=exc.status_code)
        return render(request, "error.html", {"err": err}, status_code=err.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        """Bad form input: list the offending fields."""
        problems = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "request"
            problems.append(f"{field}: {error.get('msg', 'invalid value')}")
        err = YelpCampException("; ".join(problems), code="VALIDATION_ERROR", status_code=400)
        return render(request, "error.html", {"err": err}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions without leaking details."""
        logger.exception(f"Unexpected error: {exc}")
        err = YelpCampException(DEFAULT_ERROR_MESSAGE, code="INTERNAL_ERROR", status_code=500)
        return render(request, "error.html", {"err": err}, status_code=500)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(users.router, tags=["Users"])

    app.include_router(
        campgrounds.router,
        prefix="/campgrounds",
        tags=["Campgrounds"]
    )

    app.include_router(
        reviews.router,
        prefix="/campgrounds/{campground_id}/reviews",
        tags=["Reviews"]
    )

    app.include_router(health.router, tags=["Health"])

    @app.get("/", tags=["Root"])
    async def home(request: Request):
        """Landing page."""
        return render(request, "home.html")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
