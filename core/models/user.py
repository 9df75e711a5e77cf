# =============================================================================
# core/models/user.py - User & Login Schemas
# =============================================================================
# These models define the login/registration contract:
# - LoginType: The two things the login form can do
# - LoginForm: The exact form posted to /login
# - LoginActionData: Validation errors returned as data, not raised
#
# The redirect target is coerced onto a fixed allow-list while parsing, so a
# parsed LoginForm never carries an unsafe redirect.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6

DEFAULT_REDIRECT = "/jokes"
SAFE_REDIRECTS = frozenset({"/jokes", "/", "https://remux.run"})


def resolve_redirect(url: Any) -> str:
    """Return ``url`` if it is a known-safe destination, else the jokes list."""
    if isinstance(url, str) and url in SAFE_REDIRECTS:
        return url
    return DEFAULT_REDIRECT


class LoginType(str, Enum):
    """
    What the login form was submitted for.

    - login: authenticate an existing user
    - register: create a new user and sign them in
    """
    LOGIN = "login"
    REGISTER = "register"


class LoginFields(BaseModel):
    """
    Submitted values echoed back into the form on failure.

    Note: the password is echoed too, so the user doesn't have to retype it.
    """

    login_type: str
    username: str
    password: str


class LoginFieldErrors(BaseModel):
    """Per-field validation messages for the login form."""

    username: str | None = None
    password: str | None = None

    def has_errors(self) -> bool:
        return self.username is not None or self.password is not None


class LoginForm(BaseModel):
    """
    Form posted to /login.

    Example:
        {
            "loginType": "register",
            "username": "kody",
            "password": "twixrox",
            "redirectTo": "/jokes"
        }
    """

    model_config = ConfigDict(extra="forbid")

    login_type: str = Field(..., alias="loginType")
    username: str
    password: str
    redirect_to: str = Field(default=DEFAULT_REDIRECT, alias="redirectTo")

    @field_validator("redirect_to", mode="before")
    @classmethod
    def coerce_redirect(cls, value: Any) -> str:
        return resolve_redirect(value)

    def submitted_fields(self) -> LoginFields:
        return LoginFields(
            login_type=self.login_type,
            username=self.username,
            password=self.password,
        )

    def field_errors(self) -> LoginFieldErrors:
        errors = LoginFieldErrors()
        if len(self.username) < USERNAME_MIN_LENGTH:
            errors.username = f"Usernames must be at least {USERNAME_MIN_LENGTH} characters long"
        if len(self.password) < PASSWORD_MIN_LENGTH:
            errors.password = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        return errors


class LoginActionData(BaseModel):
    """Returned (not raised) when the login form has to be shown again."""

    form_error: str | None = None
    field_errors: LoginFieldErrors | None = None
    fields: LoginFields | None = None
