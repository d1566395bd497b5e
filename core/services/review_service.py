# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Reviews live in their own collection; each campground keeps the list of
# its review ids.
# =============================================================================

import logging

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from app.exceptions import PermissionDeniedError, ReviewNotFoundError
from core.models.campground import Campground, Review, ReviewForm
from lib.mongo_client import CAMPGROUNDS, REVIEWS, parse_object_id

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for review operations."""

    def __init__(self, database: AsyncDatabase):
        self._campgrounds = database[CAMPGROUNDS]
        self._reviews = database[REVIEWS]

    async def list_reviews(self, campground: Campground) -> list[Review]:
        """Reviews of a campground, in the order they were posted."""
        ids = [ObjectId(r) for r in campground.review_ids]
        if not ids:
            return []
        docs = await self._reviews.find({"_id": {"$in": ids}}).to_list(length=None)
        by_id = {str(doc["_id"]): Review.from_document(doc) for doc in docs}
        return [by_id[r] for r in campground.review_ids if r in by_id]

    async def create_review(self, campground: Campground, form: ReviewForm, author_id: str) -> Review:
        doc = {**form.model_dump(), "author": ObjectId(author_id)}
        result = await self._reviews.insert_one(doc)
        await self._campgrounds.update_one(
            {"_id": ObjectId(campground.id)},
            {"$push": {"reviews": result.inserted_id}},
        )
        logger.info(f"Created review: {result.inserted_id} on campground: {campground.id}")
        return Review.from_document({**doc, "_id": result.inserted_id})

    async def delete_review(self, campground_id: str, review_id: str, user_id: str) -> None:
        """
        Delete a review the user wrote.

        Raises:
            ReviewNotFoundError: If the review doesn't exist
            PermissionDeniedError: If the user isn't the review's author
        """
        oid = parse_object_id(review_id)
        doc = await self._reviews.find_one({"_id": oid}) if oid else None
        if doc is None:
            raise ReviewNotFoundError(campground_id, review_id)

        review = Review.from_document(doc)
        if review.author_id != user_id:
            raise PermissionDeniedError(redirect_to=f"/campgrounds/{campground_id}")

        campground_oid = parse_object_id(campground_id)
        if campground_oid is not None:
            await self._campgrounds.update_one(
                {"_id": campground_oid},
                {"$pull": {"reviews": oid}},
            )
        await self._reviews.delete_one({"_id": oid})
        logger.info(f"Deleted review: {review_id} from campground: {campground_id}")
