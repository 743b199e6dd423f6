"""Reset the admin account to the simple reset password.

Unlike fix-password, a missing account is an error.
"""

from sqlmodel import Session

from equinox.auth.service import find_user_by_email
from equinox.core.security import hash_password
from equinox.core.settings import get_settings
from equinox.ops.runner import cli
from equinox.user.exceptions import UserNotFoundError
from equinox.user.models import User


def reset_password(session: Session, email: str, password: str) -> User:
    user = find_user_by_email(session, email)
    if user is None:
        raise UserNotFoundError(f"User not found: {email}")

    user.password = hash_password(password)
    session.add(user)
    session.commit()
    return user


def report(session: Session) -> User:
    settings = get_settings()
    print(f"Resetting to {settings.ops_reset_password}...")
    user = reset_password(session, settings.ops_admin_email, settings.ops_reset_password)
    print("Password reset done.")
    return user


def main() -> None:
    cli("reset-password", report)


if __name__ == "__main__":
    main()
