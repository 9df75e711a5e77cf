# =============================================================================
# app/views.py - Template Rendering
# =============================================================================
# Jinja2 environment shared by every route. Templates live in app/templates/.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render ``name`` with ``context``. Pages are never cached."""
    response = templates.TemplateResponse(
        request,
        name,
        context or {},
        status_code=status_code,
    )
    response.headers["Cache-Control"] = "no-store"
    return response
