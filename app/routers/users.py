# =============================================================================
# app/routers/users.py - Registration, Login, Logout
# =============================================================================
# GET  /register  registration form
# POST /register  create user, sign in, welcome flash
# GET  /login     login form
# POST /login     authenticate, sign in, return to the saved page
# GET  /logout    sign out (safe when already signed out)
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request

from app.dependencies import AuthStrategyDep, SessionDep, UserServiceDep
from app.exceptions import AuthenticationError, UserValidationError
from app.responses import Redirect
from app.templating import render
from core.models.session import FlashMessage
from core.models.user import Credentials

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_REDIRECT = "/campgrounds"


@router.get("/register")
async def register_form(request: Request):
    """Render the registration form."""
    return render(request, "users/register.html")


@router.post("/register")
async def register(
    session: SessionDep,
    users: UserServiceDep,
    email: Annotated[str, Form()] = "",
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Create an account and sign in as it.

    Validation and duplicate errors go back to the form as an error
    flash; no user is created in that case.
    """
    try:
        user = await users.register(email=email, username=username, password=password)
    except UserValidationError as e:
        logger.info(f"Registration rejected: {e.code}")
        return Redirect("/register", FlashMessage.error(e.message)).apply(session)

    session.login(user.id)
    return Redirect(DEFAULT_REDIRECT, FlashMessage.success("Welcome to Yelp Camp!")).apply(session)


@router.get("/login")
async def login_form(request: Request):
    """Render the login form."""
    return render(request, "users/login.html")


@router.post("/login")
async def login(
    session: SessionDep,
    strategy: AuthStrategyDep,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """
    Verify credentials, then sign in.

    Redirects to the page the login guard saved, falling back to the
    campground list. The saved page is cleared either way.
    """
    try:
        user = await strategy.authenticate(Credentials(username=username, password=password))
    except AuthenticationError as e:
        return Redirect("/login", FlashMessage.error(e.message)).apply(session)

    redirect_url = session.pop_return_to() or DEFAULT_REDIRECT
    session.login(user.id)
    logger.info(f"User signed in: {user.username}")
    return Redirect(redirect_url, FlashMessage.success("Welcome back")).apply(session)


@router.get("/logout")
async def logout(session: SessionDep):
    """Sign out and say goodbye."""
    session.logout()
    return Redirect(DEFAULT_REDIRECT, FlashMessage.success("Good bye, come again.")).apply(session)
