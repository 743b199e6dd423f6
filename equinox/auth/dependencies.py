"""Auth domain dependencies.

Resolve the logged-in user from the signed session cookie.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from equinox.auth.exceptions import AdminRequiredError, NotAuthenticatedError
from equinox.core.sessions import SESSION_USER_ID
from equinox.db.engine import get_session
from equinox.user.exceptions import UserNotFoundError
from equinox.user.models import User


def get_current_user(
    request: Request,
    session: Annotated[Session, Depends(get_session)],
) -> User:
    """Return the user stored in the session.

    Raises:
        NotAuthenticatedError: If there is no (valid) session
        UserNotFoundError: If the session points at a deleted user
    """
    raw_id = request.session.get(SESSION_USER_ID)
    if not raw_id:
        raise NotAuthenticatedError()
    try:
        user_id = uuid.UUID(str(raw_id))
    except ValueError as e:
        request.session.clear()
        raise NotAuthenticatedError() from e

    user = session.get(User, user_id)
    if user is None:
        raise UserNotFoundError()
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


def require_auth(_user: CurrentUserDep) -> None:
    """Require authentication without injecting user into path operation.

    Use as a router-level dependency when all routes require auth:
        router = APIRouter(dependencies=[Depends(require_auth)])
    """


def get_admin_user(user: CurrentUserDep) -> User:
    """Verify the current user has the Admin role.

    Raises:
        AdminRequiredError: If user is not an admin
    """
    if not user.is_admin:
        raise AdminRequiredError()
    return user


AdminUserDep = Annotated[User, Depends(get_admin_user)]
