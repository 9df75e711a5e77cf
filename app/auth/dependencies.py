# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for session authentication.
#
# Usage:
#   from app.auth import get_current_user, CurrentUserDep
#
#   @router.get("/protected")
#   async def protected(user: CurrentUserDep):
#       return {"username": user.username}
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.auth.models import AuthUser
from app.auth.session import get_user, get_user_id
from app.dependencies import DbSessionDep
from app.exceptions import LoginRequiredError


def get_current_user(request: Request, db: DbSessionDep) -> AuthUser:
    """
    The signed-in user.

    Anonymous requests, and cookies for a user that no longer exists, are
    redirected to the login page, which sends the user back here after
    signing in.

    Usage:
        @router.get("/jokes/new")
        async def new_joke(user: AuthUser = Depends(get_current_user)):
            ...
    """
    user = get_user(request, db)
    if user is None:
        raise LoginRequiredError(request.url.path)
    return user


def get_current_user_id_optional(request: Request) -> str | None:
    """
    Optionally get the signed-in user's id.

    Returns None for anonymous requests instead of redirecting.
    Useful for pages anyone can see but owners see more of.
    """
    return get_user_id(request)


def get_current_user_optional(request: Request, db: DbSessionDep) -> AuthUser | None:
    """The signed-in user (for page headers), or None."""
    return get_user(request, db)


# Type aliases for dependency injection
CurrentUserDep = Annotated[AuthUser, Depends(get_current_user)]
OptionalUserIdDep = Annotated[str | None, Depends(get_current_user_id_optional)]
OptionalUserDep = Annotated[AuthUser | None, Depends(get_current_user_optional)]
