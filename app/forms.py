# =============================================================================
# app/forms.py - Form Body Parsing
# =============================================================================
# Turns a urlencoded/multipart body into a flat dict of strings so it can be
# validated by one of the pydantic form models in core/models.
# =============================================================================

from fastapi import Request


class MalformedFormError(ValueError):
    """Raised when a form repeats a field or carries a file upload."""


async def read_form(request: Request) -> dict[str, str]:
    """
    Read the request body as a form.

    Every field must appear once and be plain text.

    Raises:
        MalformedFormError: If a field is repeated or is a file
    """
    form = await request.form()
    fields: dict[str, str] = {}
    for key, value in form.multi_items():
        if key in fields:
            raise MalformedFormError(f"Field {key!r} was submitted more than once")
        if not isinstance(value, str):
            raise MalformedFormError(f"Field {key!r} must be text")
        fields[key] = value
    return fields
