"""Auth domain router.

Session-cookie login for the dashboard. Handlers are thin and delegate to
`equinox.auth.service`.
"""

import logging

from fastapi import APIRouter, Request, status

from equinox.auth import service
from equinox.auth.dependencies import AdminUserDep, CurrentUserDep
from equinox.auth.schemas import (
    AuthMessage,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from equinox.core.constants import CommonResponses, Routes
from equinox.core.deps import SessionDep
from equinox.core.sessions import SESSION_USER_ID, SESSION_USER_ROLE
from equinox.user.schemas import UserPublicRead

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.AUTH.prefix,
    tags=[Routes.AUTH.tag],
    responses={**CommonResponses.BAD_REQUEST},
)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={**CommonResponses.UNAUTHORIZED},
)
def login(credentials: LoginRequest, request: Request, session: SessionDep):
    """Log in with email and password and start a session."""
    user = service.authenticate(session, credentials.email, credentials.password)

    request.session.clear()
    request.session[SESSION_USER_ID] = str(user.id)
    request.session[SESSION_USER_ROLE] = user.role.value
    logger.info("User logged in", extra={"user_email": user.email})

    return LoginResponse(
        user=UserPublicRead.model_validate(user),
        message="Login successful",
    )


@router.post("/logout", response_model=AuthMessage)
def logout(request: Request):
    request.session.clear()
    return AuthMessage(message="Logout successful")


@router.get(
    "/me",
    response_model=UserPublicRead,
    responses={**CommonResponses.UNAUTHORIZED, **CommonResponses.NOT_FOUND},
)
def me(user: CurrentUserDep):
    return user


@router.post(
    "/change-password",
    response_model=AuthMessage,
    responses={**CommonResponses.UNAUTHORIZED},
)
def change_password(
    payload: ChangePasswordRequest, user: CurrentUserDep, session: SessionDep
):
    service.change_password(
        session, user, payload.current_password, payload.new_password
    )
    return AuthMessage(message="Password changed successfully")


@router.post(
    "/register",
    response_model=UserPublicRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.FORBIDDEN,
        **CommonResponses.CONFLICT,
    },
)
def register(payload: RegisterRequest, admin: AdminUserDep, session: SessionDep):
    """Create a user account. Admin only."""
    user = service.register_user(session, payload)
    logger.info(
        "User registered by %s", admin.email, extra={"user_email": user.email}
    )
    return user
