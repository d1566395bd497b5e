# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the web app:
# - models/: Pydantic schemas for documents, sessions and form input
# - services/: users, sessions, campgrounds, reviews, seeding
#
# Code in this package should NOT import from FastAPI.
# Services receive the database handle they work on, which keeps them
# testable against an in-memory fake.
# =============================================================================
