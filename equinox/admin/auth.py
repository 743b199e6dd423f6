from sqladmin.authentication import AuthenticationBackend
from sqlmodel import Session
from starlette.requests import Request

from equinox.auth.service import find_user_by_email
from equinox.core.security import verify_password
from equinox.core.settings import get_settings
from equinox.db.engine import engine

ADMIN_SESSION_KEY = "admin_user"


class AdminAuth(AuthenticationBackend):
    """SQLAdmin login for users holding the Admin role."""

    def __init__(self) -> None:
        # SQLAdmin signs its own session cookie with this secret.
        settings = get_settings()
        super().__init__(secret_key=settings.session_secret_key)

    async def login(self, request: Request) -> bool:
        form = await request.form()
        email = str(form.get("username", form.get("email", ""))).strip()
        password = str(form.get("password", ""))

        with Session(engine) as session:
            user = find_user_by_email(session, email)
            ok = (
                user is not None
                and user.is_admin
                and verify_password(password, user.password)
            )
        if ok:
            request.session[ADMIN_SESSION_KEY] = email
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get(ADMIN_SESSION_KEY))
