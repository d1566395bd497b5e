# =============================================================================
# core/services/campground_service.py - Campground Business Logic
# =============================================================================
# Handles campground CRUD and ownership checks. Deleting a campground also
# deletes its reviews.
# =============================================================================

import logging
from typing import Any

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from app.exceptions import CampgroundNotFoundError, PermissionDeniedError
from core.models.campground import Campground, CampgroundForm
from lib.mongo_client import CAMPGROUNDS, REVIEWS, parse_object_id

logger = logging.getLogger(__name__)


class CampgroundService:
    """
    Service for campground operations.

    Provides a clean interface between route handlers and the
    "campgrounds" collection.
    """

    def __init__(self, database: AsyncDatabase):
        self._campgrounds = database[CAMPGROUNDS]
        self._reviews = database[REVIEWS]

    async def list_campgrounds(self) -> list[Campground]:
        docs = await self._campgrounds.find({}).to_list(length=None)
        return [Campground.from_document(doc) for doc in docs]

    async def get_campground(self, campground_id: str) -> Campground:
        """
        Get a campground by ID.

        Raises:
            CampgroundNotFoundError: If the id is malformed or unknown
        """
        oid = parse_object_id(campground_id)
        doc = await self._campgrounds.find_one({"_id": oid}) if oid else None
        if doc is None:
            raise CampgroundNotFoundError(campground_id)
        return Campground.from_document(doc)

    async def get_owned_campground(self, campground_id: str, user_id: str) -> Campground:
        """
        Get a campground the user is allowed to change.

        Raises:
            CampgroundNotFoundError: If it doesn't exist
            PermissionDeniedError: If the user isn't the author
        """
        campground = await self.get_campground(campground_id)
        if campground.author_id != user_id:
            raise PermissionDeniedError(redirect_to=f"/campgrounds/{campground.id}")
        return campground

    async def create_campground(self, form: CampgroundForm, author_id: str) -> Campground:
        doc = {
            **form.model_dump(),
            "images": [],
            "author": ObjectId(author_id),
            "reviews": [],
        }
        result = await self._campgrounds.insert_one(doc)
        logger.info(f"Created campground: {result.inserted_id} by user: {author_id}")
        return Campground.from_document({**doc, "_id": result.inserted_id})

    async def update_campground(self, campground_id: str, form: CampgroundForm) -> Campground:
        campground = await self.get_campground(campground_id)
        await self._campgrounds.update_one(
            {"_id": ObjectId(campground.id)},
            {"$set": form.model_dump()},
        )
        logger.info(f"Updated campground: {campground.id}")
        return await self.get_campground(campground.id)

    async def delete_campground(self, campground_id: str) -> None:
        """Delete a campground and every review attached to it."""
        campground = await self.get_campground(campground_id)
        review_ids = [ObjectId(r) for r in campground.review_ids]
        await self._campgrounds.delete_one({"_id": ObjectId(campground.id)})
        if review_ids:
            await self._reviews.delete_many({"_id": {"$in": review_ids}})
        logger.info(f"Deleted campground: {campground.id} and {len(review_ids)} reviews")

    # -------------------------------------------------------------------------
    # Bulk operations (seeding)
    # -------------------------------------------------------------------------

    async def delete_all(self) -> int:
        result = await self._campgrounds.delete_many({})
        return result.deleted_count

    async def insert_document(self, doc: dict[str, Any]) -> str:
        result = await self._campgrounds.insert_one(doc)
        return str(result.inserted_id)
