# =============================================================================
# core/services/seed_service.py - Sample Campground Generator
# =============================================================================
# Wipes the campgrounds collection and inserts SEED_COUNT random
# campgrounds, one at a time. Used by scripts/seed.py for development data.
#
# Each campground gets:
# - title: "<descriptor> <place>"
# - location + coordinates from a random city
# - price: random integer in [PRICE_MIN, PRICE_MAX]
# - the same placeholder description and two placeholder images
# =============================================================================

import logging
import random
from typing import Any, Sequence, TypeVar

from bson import ObjectId
from pymongo.asynchronous.database import AsyncDatabase

from core.services.campground_service import CampgroundService
from lib.seed_data import CITIES, DESCRIPTORS, PLACES

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEED_COUNT = 200
PRICE_MIN = 10
PRICE_MAX = 29

PLACEHOLDER_DESCRIPTION = (
    "Lorem ipsum dolor sit amet consectetur adipisicing elit. Repellendus "
    "asperiores, totam aut inventore quam nihil nam enim vero eum dignissimos "
    "assumenda praesentium iste eaque, tenetur atque consequuntur. "
    "Reprehenderit, dignissimos autem."
)

PLACEHOLDER_IMAGES = [
    {
        "url": "https://res.cloudinary.com/dvu6lzyay/image/upload/v1679666202/YelpCamp/auvl9dr8r5eih2vqzwff.png",
        "filename": "YelpCamp/auvl9dr8r5eih2vqzwff",
    },
    {
        "url": "https://res.cloudinary.com/dvu6lzyay/image/upload/v1679666205/YelpCamp/av5gxdobywtghfxrfyge.png",
        "filename": "YelpCamp/av5gxdobywtghfxrfyge",
    },
]


def sample(items: Sequence[T], rng: random.Random) -> T:
    """Pick one element at random."""
    return items[rng.randrange(len(items))]


def build_campground(rng: random.Random, author_id: str) -> dict[str, Any]:
    """Assemble one random campground document."""
    city, state, latitude, longitude = sample(CITIES, rng)
    return {
        "author": ObjectId(author_id),
        "location": f"{city}, {state}",
        "title": f"{sample(DESCRIPTORS, rng)} {sample(PLACES, rng)}",
        "price": rng.randint(PRICE_MIN, PRICE_MAX),
        "geometry": {
            "type": "Point",
            "coordinates": [longitude, latitude],
        },
        # fresh dicts so no two documents share an image object
        "images": [dict(image) for image in PLACEHOLDER_IMAGES],
        "description": PLACEHOLDER_DESCRIPTION,
        "reviews": [],
    }


async def seed_campgrounds(
    database: AsyncDatabase,
    author_id: str,
    count: int = SEED_COUNT,
    rng: random.Random | None = None,
) -> int:
    """
    Replace all campgrounds with `count` random ones.

    Inserts are sequential: each is awaited before the next is built.

    Returns:
        Number of campgrounds inserted
    """
    rng = rng or random.Random()
    campgrounds = CampgroundService(database)

    deleted = await campgrounds.delete_all()
    logger.info(f"Deleted {deleted} existing campgrounds")

    for _ in range(count):
        await campgrounds.insert_document(build_campground(rng, author_id))

    logger.info(f"Inserted {count} sample campgrounds")
    return count
