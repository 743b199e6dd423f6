"""Check that the admin credentials verify against the stored hash."""

import logging

from sqlmodel import Session

from equinox.auth.service import find_user_by_email
from equinox.core.security import verify_password
from equinox.core.settings import get_settings
from equinox.ops.runner import cli

logger = logging.getLogger("equinox.ops.test-login")


def verify_login(session: Session, email: str, password: str) -> bool | None:
    """Return whether the password matches, or None when the user does not exist."""
    user = find_user_by_email(session, email)
    if user is None:
        logger.warning("User not found.", extra={"user_email": email})
        return None

    print("Found user:", user.email)
    print("Stored Hash:", user.password)
    match = verify_password(password, user.password)
    print("Password Valid:", match)
    return match


def report(session: Session) -> bool | None:
    print("Testing Login...")
    settings = get_settings()
    return verify_login(session, settings.ops_admin_email, settings.ops_admin_password)


def main() -> None:
    cli("test-login", report)


if __name__ == "__main__":
    main()
