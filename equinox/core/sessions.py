"""Signed-cookie sessions for dashboard logins."""

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from equinox.core.settings import get_settings

SESSION_COOKIE = "equinox_session"

# Keys stored in request.session by the auth routes.
SESSION_USER_ID = "user_id"
SESSION_USER_ROLE = "user_role"


def add_session_middleware(app: FastAPI) -> None:
    settings = get_settings()

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=SESSION_COOKIE,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.is_secure_cookie,
    )
