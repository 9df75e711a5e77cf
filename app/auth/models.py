# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for session data.
# =============================================================================

from pydantic import BaseModel, ConfigDict


class AuthUser(BaseModel):
    """
    Signed-in user shown in page headers.

    Built from the users table after the session cookie has been verified.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: str
    username: str


class TokenPayload(BaseModel):
    """
    Decoded session token.

    Only standard JWT claims are used; the token carries nothing but the
    user id and its validity window.
    """

    sub: str  # User ID
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
