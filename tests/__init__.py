# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the YelpCamp app:
# - test_models.py: Unit tests for Pydantic model validation
# - test_users.py: Registration, login, logout
# - test_sessions.py / test_session_store.py: Sessions and their backends
# - test_campgrounds.py: Campground and review pages
# - test_seed.py: Sample data generator
# - fakes.py: In-memory stand-in for the MongoDB driver
#
# Run tests with: pytest
# =============================================================================
