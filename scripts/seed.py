#!/usr/bin/env python3
# =============================================================================
# scripts/seed.py - Sample Data Loader
# =============================================================================
# Replaces every campground in the database with 200 random sample
# campgrounds, then closes the connection.
#
# Usage:
#   python scripts/seed.py
#
# Prerequisites:
#   - MongoDB must be running at DB_URL (default mongodb://localhost:27017/YelpCamp)
#   - SEED_AUTHOR_ID should be the id of an existing user
# =============================================================================

import asyncio
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from core.services.seed_service import seed_campgrounds
from lib.mongo_client import DocumentStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("seed")


async def run() -> int:
    database = DocumentStore.get_database(settings.DB_URL)
    try:
        await DocumentStore.ping(database)
        logger.info("Database connected")
        return await seed_campgrounds(database, author_id=settings.SEED_AUTHOR_ID)
    finally:
        await DocumentStore.close()


def main():
    """Seed the campgrounds collection."""
    inserted = asyncio.run(run())
    logger.info(f"Done: {inserted} campgrounds")


if __name__ == "__main__":
    main()
