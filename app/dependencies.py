# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The database handle and session manager live on app.state (set up in
# the lifespan); the per-request Session lives on request.state.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request
from pymongo.asynchronous.database import AsyncDatabase

from core.services.auth_strategy import AuthStrategy, LocalStrategy
from core.services.campground_service import CampgroundService
from core.services.review_service import ReviewService
from core.services.session_service import Session
from core.services.user_service import UserService


def get_database(request: Request) -> AsyncDatabase:
    """Get the app's MongoDB database handle."""
    return request.app.state.database


def get_session(request: Request) -> Session:
    """
    Get the current request's session.

    Requires SessionMiddleware.
    """
    return request.state.session


DatabaseDep = Annotated[AsyncDatabase, Depends(get_database)]
SessionDep = Annotated[Session, Depends(get_session)]


def get_user_service(database: DatabaseDep) -> UserService:
    return UserService(database)


def get_campground_service(database: DatabaseDep) -> CampgroundService:
    return CampgroundService(database)


def get_review_service(database: DatabaseDep) -> ReviewService:
    return ReviewService(database)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CampgroundServiceDep = Annotated[CampgroundService, Depends(get_campground_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]


def get_auth_strategy(users: UserServiceDep) -> AuthStrategy:
    """
    Strategy used by POST /login.

    Override with app.dependency_overrides to plug in another one.
    """
    return LocalStrategy(users)


AuthStrategyDep = Annotated[AuthStrategy, Depends(get_auth_strategy)]
