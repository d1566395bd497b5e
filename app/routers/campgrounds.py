# =============================================================================
# app/routers/campgrounds.py - Campground Pages
# =============================================================================
# Listing and viewing are public. Creating requires a signed-in user;
# editing and deleting require the campground's author.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path, Request

from app.auth import AuthUser, get_current_user
from app.dependencies import (
    CampgroundServiceDep,
    ReviewServiceDep,
    SessionDep,
    UserServiceDep,
)
from app.responses import Redirect
from app.templating import render
from core.models.campground import CampgroundForm
from core.models.session import FlashMessage

router = APIRouter()

CampgroundId = Annotated[str, Path(description="Campground id")]


@router.get("")
async def index(request: Request, campgrounds: CampgroundServiceDep):
    """List every campground."""
    return render(request, "campgrounds/index.html", {
        "campgrounds": await campgrounds.list_campgrounds(),
    })


@router.get("/new")
async def new_form(
    request: Request,
    user: AuthUser = Depends(get_current_user),
):
    """Render the new campground form."""
    return render(request, "campgrounds/new.html")


@router.post("")
async def create(
    session: SessionDep,
    campgrounds: CampgroundServiceDep,
    form: Annotated[CampgroundForm, Form()],
    user: AuthUser = Depends(get_current_user),
):
    campground = await campgrounds.create_campground(form, author_id=user.id)
    return Redirect(
        f"/campgrounds/{campground.id}",
        FlashMessage.success("Successfully made a new campground!"),
    ).apply(session)


@router.get("/{campground_id}")
async def show(
    request: Request,
    campground_id: CampgroundId,
    campgrounds: CampgroundServiceDep,
    reviews: ReviewServiceDep,
    users: UserServiceDep,
):
    """
    Show one campground with its reviews.

    Unknown ids redirect to the list with an error flash.
    """
    campground = await campgrounds.get_campground(campground_id)
    campground_reviews = await reviews.list_reviews(campground)
    author_ids = [r.author_id for r in campground_reviews if r.author_id]
    if campground.author_id:
        author_ids.append(campground.author_id)

    return render(request, "campgrounds/show.html", {
        "campground": campground,
        "reviews": campground_reviews,
        "usernames": await users.get_usernames(author_ids),
    })


@router.get("/{campground_id}/edit")
async def edit_form(
    request: Request,
    campground_id: CampgroundId,
    campgrounds: CampgroundServiceDep,
    user: AuthUser = Depends(get_current_user),
):
    campground = await campgrounds.get_owned_campground(campground_id, user.id)
    return render(request, "campgrounds/edit.html", {"campground": campground})


@router.put("/{campground_id}")
async def update(
    session: SessionDep,
    campground_id: CampgroundId,
    campgrounds: CampgroundServiceDep,
    form: Annotated[CampgroundForm, Form()],
    user: AuthUser = Depends(get_current_user),
):
    await campgrounds.get_owned_campground(campground_id, user.id)
    campground = await campgrounds.update_campground(campground_id, form)
    return Redirect(
        f"/campgrounds/{campground.id}",
        FlashMessage.success("Successfully updated campground!"),
    ).apply(session)


@router.delete("/{campground_id}")
async def delete(
    session: SessionDep,
    campground_id: CampgroundId,
    campgrounds: CampgroundServiceDep,
    user: AuthUser = Depends(get_current_user),
):
    await campgrounds.get_owned_campground(campground_id, user.id)
    await campgrounds.delete_campground(campground_id)
    return Redirect(
        "/campgrounds",
        FlashMessage.success("Successfully deleted campground"),
    ).apply(session)
