"""Auth domain service.

Password login, password change and admin registration against the local
users table. Routers stay thin and delegate here; the operator tools reuse
`find_user_by_email`.
"""

import logging

from sqlmodel import Session, select

from equinox.auth.exceptions import InvalidCredentialsError, PasswordPolicyError
from equinox.auth.schemas import RegisterRequest
from equinox.core.exceptions import BadRequestError
from equinox.core.mixins import utc_now
from equinox.core.security import hash_password, password_too_long, verify_password
from equinox.user.exceptions import EmailExistsError
from equinox.user.models import REGISTRABLE_ROLES, User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def find_user_by_email(session: Session, email: str) -> User | None:
    return session.exec(select(User).where(User.email == email)).first()


def check_password_policy(password: str) -> None:
    """Raise PasswordPolicyError listing every rule the password breaks."""
    problems = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"at least {MIN_PASSWORD_LENGTH} characters")
    if password_too_long(password):
        problems.append("at most 72 bytes")
    if problems:
        raise PasswordPolicyError(requirements=problems)


def authenticate(session: Session, email: str, password: str) -> User:
    """Verify credentials and stamp ``last_login``.

    Unknown email and wrong password raise the same error so the response
    does not reveal which accounts exist.
    """
    user = find_user_by_email(session, email)
    if user is None or not verify_password(password, user.password):
        logger.info("Failed login", extra={"user_email": email})
        raise InvalidCredentialsError()

    user.last_login = utc_now()
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def change_password(
    session: Session, user: User, current_password: str, new_password: str
) -> None:
    check_password_policy(new_password)
    if not verify_password(current_password, user.password):
        raise InvalidCredentialsError("Current password is incorrect")

    user.password = hash_password(new_password)
    user.must_change_password = False
    session.add(user)
    session.commit()


def register_user(session: Session, data: RegisterRequest) -> User:
    """Create an account that must change its password on first login."""
    if data.role not in REGISTRABLE_ROLES:
        allowed = ", ".join(role.value for role in REGISTRABLE_ROLES)
        raise BadRequestError(f"Role must be one of: {allowed}")
    if password_too_long(data.password):
        raise PasswordPolicyError(requirements=["at most 72 bytes"])
    if find_user_by_email(session, data.email) is not None:
        raise EmailExistsError()

    user = User(
        name=data.name,
        email=data.email,
        password=hash_password(data.password),
        role=data.role,
        must_change_password=True,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
