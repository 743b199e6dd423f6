"""User domain router."""

from fastapi import APIRouter, Depends
from sqlmodel import select

from equinox.auth.dependencies import require_auth
from equinox.core.constants import CommonResponses, Routes
from equinox.core.deps import SessionDep
from equinox.user.models import User
from equinox.user.schemas import UserPublicRead

router = APIRouter(
    prefix=Routes.USER.prefix,
    tags=[Routes.USER.tag],
    dependencies=[Depends(require_auth)],
    responses={**CommonResponses.UNAUTHORIZED},
)


@router.get("", response_model=list[UserPublicRead])
def list_users(session: SessionDep):
    """List all users ordered by name."""
    return session.exec(select(User).order_by(User.name, User.email)).all()
