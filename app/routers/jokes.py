# =============================================================================
# app/routers/jokes.py - Joke Pages
# =============================================================================
# GET  /jokes             - Jokes index: recent jokes plus one random joke
# GET  /jokes/random      - Redirect to a random joke
# GET  /jokes/new         - New joke form (login required)
# POST /jokes/new         - Create a joke (login required)
# GET  /jokes/{joke_id}   - Joke detail; owners also get a delete button
# POST /jokes/{joke_id}   - Delete the joke (_method=delete, owner only)
#
# Errors on /jokes/{joke_id} are rendered by the joke error boundary in
# app/exceptions.py, keyed on status code.
# =============================================================================

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Path, Request
from fastapi.responses import RedirectResponse, Response
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app import views
from app.auth import CurrentUserDep, OptionalUserDep, OptionalUserIdDep
from app.auth.models import AuthUser
from app.auth.session import require_user_id
from app.dependencies import DbSessionDep
from app.exceptions import NoJokesError, UnsupportedMethodError
from app.forms import MalformedFormError, read_form
from core.models.joke import (
    JokeActionData,
    JokeCreateForm,
    JokeDetail,
    JokeListItem,
    JokeMethodForm,
    JokeResponse,
)
from core.services.joke_service import JokeService

logger = logging.getLogger(__name__)

router = APIRouter()

JokeIdPath = Annotated[str, Path(description="Joke ID")]


def _layout_context(db: Session, user: AuthUser | None) -> dict[str, Any]:
    """Data every page under /jokes needs for its header and sidebar."""
    return {
        "user": user,
        "joke_list_items": [
            JokeListItem.model_validate(joke) for joke in JokeService.list_jokes(db)
        ],
    }


def _render_new_joke(
    request: Request,
    db: Session,
    user: AuthUser | None,
    action_data: JokeActionData | None = None,
    status_code: int = 200,
) -> Response:
    context = _layout_context(db, user)
    context["action_data"] = action_data
    return views.render(request, "jokes/new.html", context, status_code=status_code)


# =============================================================================
# Index
# =============================================================================

@router.get("")
async def jokes_index(request: Request, db: DbSessionDep, user: OptionalUserDep):
    """Show the recent jokes and one random joke, if there are any."""
    context = _layout_context(db, user)
    try:
        context["random_joke"] = JokeResponse.model_validate(JokeService.random_joke(db))
    except NoJokesError:
        context["random_joke"] = None
    return views.render(request, "jokes/index.html", context)


@router.get("/random")
async def random_joke(db: DbSessionDep):
    """
    Redirect to a random joke's page.

    Raises:
        NoJokesError: 404 when there are no jokes
    """
    joke = JokeService.random_joke(db)
    return RedirectResponse(f"/jokes/{joke.id}", status_code=302)


# =============================================================================
# New Joke
# =============================================================================

@router.get("/new")
async def new_joke_page(request: Request, db: DbSessionDep, user: CurrentUserDep):
    """Render the new joke form. Anyone not signed in is sent to /login first."""
    return _render_new_joke(request, db, user)


@router.post("/new")
async def new_joke_action(request: Request, db: DbSessionDep, user: CurrentUserDep):
    """
    Create a joke owned by the signed-in user.

    Returns:
        302 to the new joke's page, or 400 with the form re-rendered

    Raises:
        LoginRequiredError: Redirect to /login when anonymous or when the
            session user no longer exists
    """
    try:
        form = JokeCreateForm.model_validate(await read_form(request))
    except (MalformedFormError, ValidationError) as e:
        logger.info(f"Rejected new joke form: {e}")
        return _render_new_joke(
            request,
            db,
            user,
            JokeActionData(form_error="Form not submitted correctly."),
            status_code=400,
        )

    field_errors = form.field_errors()
    if field_errors.has_errors():
        return _render_new_joke(
            request,
            db,
            user,
            JokeActionData(
                field_errors=field_errors,
                fields={"name": form.name, "content": form.content},
            ),
            status_code=400,
        )

    joke = JokeService.create_joke(db, jokester_id=user.id, name=form.name, content=form.content)
    return RedirectResponse(f"/jokes/{joke.id}", status_code=302)


# =============================================================================
# Joke Detail
# =============================================================================

@router.get("/{joke_id}")
async def joke_detail(
    request: Request,
    joke_id: JokeIdPath,
    db: DbSessionDep,
    user_id: OptionalUserIdDep,
    user: OptionalUserDep,
):
    """
    Show a joke.

    Anyone can read a joke; only its jokester sees the delete button.

    Raises:
        JokeNotFoundError: 404 when the joke doesn't exist
    """
    joke = JokeService.get_joke(db, joke_id)
    detail = JokeDetail(
        joke=JokeResponse.model_validate(joke),
        is_owner=user_id is not None and user_id == joke.jokester_id,
    )

    context = _layout_context(db, user)
    context["detail"] = detail
    return views.render(request, "jokes/detail.html", context)


@router.post("/{joke_id}")
async def joke_action(request: Request, joke_id: JokeIdPath, db: DbSessionDep):
    """
    Delete a joke.

    The form must be exactly `_method=delete`. The method is checked before
    the session so a malformed form never bounces through login.

    Raises:
        UnsupportedMethodError: 400 for any other form
        LoginRequiredError: Redirect to /login when anonymous
        JokeNotFoundError: 404 when the joke doesn't exist
        NotJokeOwnerError: 401 when the user isn't the jokester
    """
    try:
        raw_form = await read_form(request)
    except MalformedFormError as e:
        logger.info(f"Rejected joke form for {joke_id}: {e}")
        raise UnsupportedMethodError(None)

    try:
        form = JokeMethodForm.model_validate(raw_form)
    except ValidationError:
        method = raw_form.get("_method")
        raise UnsupportedMethodError(method)

    if form.method != "delete":
        raise UnsupportedMethodError(form.method)

    user_id = require_user_id(request)
    JokeService.delete_joke(db, joke_id, user_id)
    return RedirectResponse("/jokes", status_code=302)
