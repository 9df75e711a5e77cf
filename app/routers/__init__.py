# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - jokes.py: Joke index, detail, create and delete pages
#
# Login/logout live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import jokes

__all__ = [
    "health",
    "jokes",
]
