# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides signed-cookie session authentication.
#
# Usage:
#   from app.auth import CurrentUserDep
#
#   @router.get("/protected")
#   async def protected(user: CurrentUserDep):
#       return {"username": user.username}
# =============================================================================

from app.auth.dependencies import (
    CurrentUserDep,
    OptionalUserDep,
    OptionalUserIdDep,
    get_current_user,
    get_current_user_id_optional,
    get_current_user_optional,
)
from app.auth.models import AuthUser, TokenPayload

__all__ = [
    "get_current_user",
    "get_current_user_id_optional",
    "get_current_user_optional",
    "CurrentUserDep",
    "OptionalUserDep",
    "OptionalUserIdDep",
    "AuthUser",
    "TokenPayload",
]
