# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - joke.py: Joke views and the joke forms (delete, create)
# - user.py: User views and the login/registration form
#
# These models define the "contract" between routes and templates.
# ORM tables live in lib/tables.py.
# =============================================================================

# -----------------------------------------------------------------------------
# Joke Models
# -----------------------------------------------------------------------------
from .joke import (
    JOKE_CONTENT_MIN_LENGTH,
    JOKE_NAME_MIN_LENGTH,
    JokeActionData,
    JokeCreateForm,
    JokeDetail,
    JokeFieldErrors,
    JokeListItem,
    JokeMethodForm,
    JokeResponse,
)

# -----------------------------------------------------------------------------
# User Models
# -----------------------------------------------------------------------------
from .user import (
    DEFAULT_REDIRECT,
    PASSWORD_MIN_LENGTH,
    SAFE_REDIRECTS,
    USERNAME_MIN_LENGTH,
    LoginActionData,
    LoginFieldErrors,
    LoginFields,
    LoginForm,
    LoginType,
    resolve_redirect,
)

__all__ = [
    # Joke
    "JOKE_CONTENT_MIN_LENGTH",
    "JOKE_NAME_MIN_LENGTH",
    "JokeActionData",
    "JokeCreateForm",
    "JokeDetail",
    "JokeFieldErrors",
    "JokeListItem",
    "JokeMethodForm",
    "JokeResponse",
    # User
    "DEFAULT_REDIRECT",
    "PASSWORD_MIN_LENGTH",
    "SAFE_REDIRECTS",
    "USERNAME_MIN_LENGTH",
    "LoginActionData",
    "LoginFieldErrors",
    "LoginFields",
    "LoginForm",
    "LoginType",
    "resolve_redirect",
]
