# =============================================================================
# app/routers/reviews.py - Campground Reviews
# =============================================================================
# Mounted under /campgrounds/{campground_id}/reviews.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Path

from app.auth import AuthUser, get_current_user
from app.dependencies import CampgroundServiceDep, ReviewServiceDep, SessionDep
from app.responses import Redirect
from core.models.campground import ReviewForm
from core.models.session import FlashMessage

router = APIRouter()


@router.post("")
async def create(
    session: SessionDep,
    campground_id: Annotated[str, Path(description="Campground id")],
    campgrounds: CampgroundServiceDep,
    reviews: ReviewServiceDep,
    form: Annotated[ReviewForm, Form()],
    user: AuthUser = Depends(get_current_user),
):
    campground = await campgrounds.get_campground(campground_id)
    await reviews.create_review(campground, form, author_id=user.id)
    return Redirect(
        f"/campgrounds/{campground.id}",
        FlashMessage.success("Created new review!"),
    ).apply(session)


@router.delete("/{review_id}")
async def delete(
    session: SessionDep,
    campground_id: Annotated[str, Path(description="Campground id")],
    review_id: Annotated[str, Path(description="Review id")],
    reviews: ReviewServiceDep,
    user: AuthUser = Depends(get_current_user),
):
    """Delete a review; only its author may."""
    await reviews.delete_review(campground_id, review_id, user_id=user.id)
    return Redirect(
        f"/campgrounds/{campground_id}",
        FlashMessage.success("Successfully deleted review"),
    ).apply(session)
