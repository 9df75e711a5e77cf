# =============================================================================
# app/auth/routes.py - Login, Registration & Logout
# =============================================================================
# GET  /login   - Login/registration form
# POST /login   - Sign in or register, then redirect with a session cookie
# GET  /logout  - Nothing to show; redirect home
# POST /logout  - Clear the session cookie and redirect home
#
# Form problems are rendered back into the login page with status 400 and the
# submitted values preserved.
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse, Response
from pydantic import ValidationError

from app import views
from app.auth import session
from app.dependencies import DbSessionDep
from app.forms import MalformedFormError, read_form
from core.models.user import LoginActionData, LoginForm, LoginType
from core.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


def _render_login(
    request: Request,
    redirect_to: str | None,
    action_data: LoginActionData | None = None,
    status_code: int = 200,
) -> Response:
    return views.render(
        request,
        "login.html",
        {
            "redirect_to": redirect_to,
            "action_data": action_data,
        },
        status_code=status_code,
    )


def _bad_request(request: Request, redirect_to: str | None, action_data: LoginActionData) -> Response:
    return _render_login(request, redirect_to, action_data, status_code=400)


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/login")
async def login_page(request: Request):
    """
    Render the login/registration form.

    The redirectTo query parameter is carried through a hidden field and
    checked against the allow-list when the form is posted.
    """
    return _render_login(request, request.query_params.get("redirectTo"))


@router.post("/login")
async def login_action(request: Request, db: DbSessionDep):
    """
    Sign in or register.

    Returns:
        302 to the resolved redirectTo with a session cookie on success,
        400 with the form re-rendered otherwise
    """
    fallback_redirect = request.query_params.get("redirectTo")

    try:
        form = LoginForm.model_validate(await read_form(request))
    except (MalformedFormError, ValidationError) as e:
        logger.info(f"Rejected login form: {e}")
        return _bad_request(
            request,
            fallback_redirect,
            LoginActionData(form_error="Form not submitted correctly."),
        )

    fields = form.submitted_fields()
    field_errors = form.field_errors()
    if field_errors.has_errors():
        return _bad_request(
            request,
            form.redirect_to,
            LoginActionData(field_errors=field_errors, fields=fields),
        )

    try:
        login_type = LoginType(form.login_type)
    except ValueError:
        return _bad_request(
            request,
            form.redirect_to,
            LoginActionData(form_error="Login type invalid", fields=fields),
        )

    if login_type is LoginType.LOGIN:
        user = UserService.login(db, form.username, form.password)
        if user is None:
            return _bad_request(
                request,
                form.redirect_to,
                LoginActionData(
                    form_error="Username/Password combination is incorrect",
                    fields=fields,
                ),
            )
        return session.create_user_session(user.id, form.redirect_to)

    if UserService.find_by_username(db, form.username) is not None:
        return _bad_request(
            request,
            form.redirect_to,
            LoginActionData(
                form_error=f"User with username {form.username} already exists",
                fields=fields,
            ),
        )

    user = UserService.register(db, form.username, form.password)
    if user is None:
        return _bad_request(
            request,
            form.redirect_to,
            LoginActionData(
                form_error="Something went wrong trying to create a new user.",
                fields=fields,
            ),
        )
    return session.create_user_session(user.id, form.redirect_to)


@router.get("/logout")
async def logout_page():
    """Direct navigation to /logout does nothing but send the user home."""
    return RedirectResponse("/", status_code=302)


@router.post("/logout")
async def logout_action(request: Request):
    """Clear the session cookie and redirect home."""
    return session.logout(request)
