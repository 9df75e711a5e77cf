# =============================================================================
# app/auth/session.py - Cookie Sessions
# =============================================================================
# The session is a signed JWT stored in an HTTP-only cookie. There is no
# server-side session table: reading a session is a pure function of the
# cookie value and the secret.
#
#   create_session_token(user_id) -> token
#   read_session_token(token)     -> user_id | None
#
# Everything else in this module wraps those two around requests/responses.
# =============================================================================

import logging
import time

from fastapi import Request
from fastapi.responses import RedirectResponse
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.auth.models import AuthUser, TokenPayload
from app.config import settings
from app.exceptions import LoginRequiredError
from core.services.user_service import UserService

logger = logging.getLogger(__name__)


# =============================================================================
# Tokens
# =============================================================================

def create_session_token(user_id: str, issued_at: int | None = None) -> str:
    """Sign a session token for ``user_id`` valid for SESSION_MAX_AGE_SECONDS."""
    now = int(time.time()) if issued_at is None else issued_at
    claims = {
        "sub": user_id,
        "iat": now,
        "exp": now + settings.SESSION_MAX_AGE_SECONDS,
    }
    return jwt.encode(claims, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)


def read_session_token(token: str | None) -> str | None:
    """
    Verify a session token and return its user id.

    Returns None for a missing, tampered, expired or malformed token.
    """
    if not token:
        return None

    try:
        claims = jwt.decode(
            token,
            settings.SESSION_SECRET,
            algorithms=[settings.SESSION_ALGORITHM],
        )
        payload = TokenPayload(**claims)
    except ExpiredSignatureError:
        logger.debug("Session token has expired")
        return None
    except (JWTError, ValidationError) as e:
        logger.warning(f"Session token rejected: {e}")
        return None

    return payload.sub or None


# =============================================================================
# Requests
# =============================================================================

def get_user_id(request: Request) -> str | None:
    """User id of the session on ``request``, or None when anonymous."""
    return read_session_token(request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_user_id(request: Request, redirect_to: str | None = None) -> str:
    """
    User id of the session on ``request``.

    Raises:
        LoginRequiredError: If there is no valid session. The error handler
            turns it into a redirect to /login?redirectTo=<redirect_to>.
    """
    user_id = get_user_id(request)
    if user_id is None:
        raise LoginRequiredError(redirect_to or request.url.path)
    return user_id


def get_user(request: Request, db: Session) -> AuthUser | None:
    """
    The signed-in user, or None.

    A valid cookie for a user that no longer exists counts as anonymous.
    """
    user_id = get_user_id(request)
    if user_id is None:
        return None

    user = UserService.get_user(db, user_id)
    if user is None:
        logger.warning(f"Session cookie references missing user {user_id}")
        return None

    return AuthUser.model_validate(user)


# =============================================================================
# Responses
# =============================================================================

def create_user_session(user_id: str, redirect_to: str) -> RedirectResponse:
    """Redirect to ``redirect_to`` with a fresh session cookie for ``user_id``."""
    response = RedirectResponse(redirect_to, status_code=302)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_token(user_id),
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    logger.info(f"Issued session cookie for user {user_id}")
    return response


def logout(request: Request) -> RedirectResponse:
    """Redirect home and clear the session cookie."""
    user_id = get_user_id(request)
    response = RedirectResponse("/", status_code=302)
    response.delete_cookie(
        settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    if user_id:
        logger.info(f"Cleared session cookie for user {user_id}")
    return response
