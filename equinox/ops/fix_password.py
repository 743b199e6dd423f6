"""Give the admin account a fresh, valid bcrypt hash of the default password."""

import logging

from sqlmodel import Session

from equinox.auth.service import find_user_by_email
from equinox.core.security import hash_password
from equinox.core.settings import get_settings
from equinox.ops.runner import cli
from equinox.user.models import User

logger = logging.getLogger("equinox.ops.fix-password")


def fix_password(session: Session, email: str, password: str) -> User | None:
    """Rehash and store ``password`` for ``email``; None if there is no such user."""
    user = find_user_by_email(session, email)
    if user is None:
        logger.warning("User not found!", extra={"user_email": email})
        return None

    user.password = hash_password(password)
    session.add(user)
    session.commit()
    return user


def report(session: Session) -> User | None:
    print("Fixing Admin Password...")
    settings = get_settings()
    user = fix_password(session, settings.ops_admin_email, settings.ops_admin_password)
    if user is not None:
        print(f"Password for {user.email} updated. New login: {settings.ops_admin_password}")
    return user


def main() -> None:
    cli("fix-password", report)


if __name__ == "__main__":
    main()
