# =============================================================================
# app/exceptions.py - Custom Exceptions & Error Boundaries
# =============================================================================
# Centralized exception handling for the app.
#
# Route handlers raise JokesAppException subclasses for request-shape and
# authorization problems. The handlers at the bottom of this module act as the
# error boundary: they turn the exception into an HTML page whose message is
# keyed on the status code (and on the joke id when the failing route has one).
#
# Recoverable form problems are NOT raised - handlers return them as data and
# re-render the form instead.
# =============================================================================

import logging
from typing import Any
from urllib.parse import urlencode

from fastapi import Request
from fastapi.responses import RedirectResponse, Response

from app import views

logger = logging.getLogger(__name__)


class JokesAppException(Exception):
    """
    Base exception for the jokes app.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "JOKES_APP_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dict (used for logging and templates)."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Request Exceptions
# =============================================================================

class UnsupportedMethodError(JokesAppException):
    """Raised when a joke form posts a _method other than "delete"."""

    def __init__(self, method: str | None):
        super().__init__(
            message=f"The _method {method} is not supported",
            code="UNSUPPORTED_METHOD",
            status_code=400,
            details={"method": method},
        )


# =============================================================================
# Joke Exceptions
# =============================================================================

class JokeNotFoundError(JokesAppException):
    """Raised when a joke ID doesn't exist."""

    def __init__(self, joke_id: str, message: str | None = None):
        super().__init__(
            message=message or f"What a joke! Joke {joke_id} was not found.",
            code="JOKE_NOT_FOUND",
            status_code=404,
            details={"joke_id": joke_id},
        )


class NoJokesError(JokesAppException):
    """Raised when a random joke is requested but the store is empty."""

    def __init__(self):
        super().__init__(
            message="There are no jokes to display.",
            code="NO_JOKES",
            status_code=404,
        )


class NotJokeOwnerError(JokesAppException):
    """Raised when someone other than the jokester tries to delete a joke."""

    def __init__(self, joke_id: str, user_id: str):
        super().__init__(
            message="Pssh, nice try. That's not your joke",
            code="NOT_JOKE_OWNER",
            status_code=401,
            details={"joke_id": joke_id, "user_id": user_id},
        )


# =============================================================================
# Auth Exceptions
# =============================================================================

class LoginRequiredError(JokesAppException):
    """
    Raised when a route needs a session and the request has none.

    Rendered as a redirect to the login page rather than an error page.
    """

    def __init__(self, redirect_to: str):
        super().__init__(
            message="You must be logged in to do that",
            code="LOGIN_REQUIRED",
            status_code=401,
            details={"redirect_to": redirect_to},
        )
        self.redirect_to = redirect_to

    @property
    def login_url(self) -> str:
        return f"/login?{urlencode({'redirectTo': self.redirect_to})}"


# =============================================================================
# Error Boundaries
# =============================================================================

# Messages shown by the joke detail page, keyed by status code
JOKE_CATCH_MESSAGES: dict[int, str] = {
    400: "What you're trying to do is not allowed.",
    404: 'Huh? What the heck is "{joke_id}"?',
    401: "Sorry, but {joke_id} is not your joke.",
}

JOKE_ERROR_MESSAGE = "There was an error loading joke by the id {joke_id}. Sorry."
GENERIC_ERROR_MESSAGE = "Something unexpected went wrong. Sorry about that."


def render_error_boundary(request: Request) -> Response:
    """Render the catch-all 500 page for errors nothing else handled."""
    joke_id = request.path_params.get("joke_id")
    if joke_id is not None:
        message = JOKE_ERROR_MESSAGE.format(joke_id=joke_id)
    else:
        message = GENERIC_ERROR_MESSAGE

    return views.render(
        request,
        "error.html",
        {"message": message, "code": "INTERNAL_ERROR"},
        status_code=500,
    )


def render_catch_boundary(request: Request, exc: JokesAppException) -> Response:
    """
    Render a thrown JokesAppException.

    Routes with a joke_id path parameter use the joke-specific messages;
    a status they don't know about escalates to the error boundary.
    """
    joke_id = request.path_params.get("joke_id")
    if joke_id is None:
        message = exc.message
    elif exc.status_code in JOKE_CATCH_MESSAGES:
        message = JOKE_CATCH_MESSAGES[exc.status_code].format(joke_id=joke_id)
    else:
        logger.error(f"Unhandled status {exc.status_code} for joke {joke_id}: {exc.message}")
        return render_error_boundary(request)

    return views.render(
        request,
        "error.html",
        {"message": message, "code": exc.code},
        status_code=exc.status_code,
    )


async def jokes_app_exception_handler(
    request: Request,
    exc: JokesAppException
) -> Response:
    """Convert JokesAppException into a redirect or an error page."""
    if isinstance(exc, LoginRequiredError):
        return RedirectResponse(exc.login_url, status_code=302)

    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return render_catch_boundary(request, exc)
