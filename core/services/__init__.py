# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .joke_service import JOKE_LIST_LIMIT, JokeService
from .user_service import UserService

__all__ = [
    "JOKE_LIST_LIMIT",
    "JokeService",
    "UserService",
]
