# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - users.py: register, login, logout
# - campgrounds.py: campground list/show/create/edit/delete
# - reviews.py: review create/delete under a campground
# - health.py: health check endpoints
#
# Each router is mounted in main.py with its URL prefix.
# =============================================================================

from . import campgrounds
from . import health
from . import reviews
from . import users

__all__ = [
    "campgrounds",
    "health",
    "reviews",
    "users",
]
