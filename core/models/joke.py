# =============================================================================
# core/models/joke.py - Joke Schemas
# =============================================================================
# These models define the contract between the joke routes and their views:
# - JokeResponse: A joke as handed to templates
# - JokeDetail: Loader data for the joke detail page
# - JokeMethodForm: The exact form posted by the delete button
# - JokeCreateForm: The exact form posted by the new joke page
# - JokeActionData: Validation errors returned as data, not raised
#
# Form models forbid unknown fields so a form with any extra key is rejected
# at the boundary.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

JOKE_NAME_MIN_LENGTH = 3
JOKE_CONTENT_MIN_LENGTH = 10


class JokeResponse(BaseModel):
    """
    A joke as rendered by the views.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Road worker",
            "content": "I never wanted to believe that my Dad was stealing...",
            "jokester_id": "660e8400-e29b-41d4-a716-446655440001",
            "created_at": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Unique joke identifier")
    name: str = Field(..., description="Short title of the joke")
    content: str = Field(..., description="The joke itself")
    jokester_id: str = Field(..., description="ID of the user who owns the joke")
    created_at: datetime | None = Field(default=None, description="When the joke was posted")


class JokeListItem(BaseModel):
    """Minimal joke info for the sidebar list."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class JokeDetail(BaseModel):
    """Loader data for GET /jokes/{joke_id}."""

    joke: JokeResponse
    is_owner: bool = Field(
        default=False,
        description="True when the session user is the joke's jokester"
    )


class JokeMethodForm(BaseModel):
    """
    Form posted to /jokes/{joke_id}.

    Only the hidden `_method` field is accepted.
    """

    model_config = ConfigDict(extra="forbid")

    method: str = Field(..., alias="_method")


class JokeCreateForm(BaseModel):
    """Form posted to /jokes/new. Length rules are checked by field_errors()."""

    model_config = ConfigDict(extra="forbid")

    name: str
    content: str

    def field_errors(self) -> "JokeFieldErrors":
        errors = JokeFieldErrors()
        if len(self.name) < JOKE_NAME_MIN_LENGTH:
            errors.name = "That joke's name is too short"
        if len(self.content) < JOKE_CONTENT_MIN_LENGTH:
            errors.content = "That joke is too short"
        return errors


class JokeFieldErrors(BaseModel):
    """Per-field validation messages for the new joke form."""

    name: str | None = None
    content: str | None = None

    def has_errors(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class JokeActionData(BaseModel):
    """Returned (not raised) when the new joke form has to be shown again."""

    form_error: str | None = None
    field_errors: JokeFieldErrors | None = None
    fields: dict[str, str] | None = None
