"""Seed the baseline accounts.

Upserts by email: new accounts are created, existing ones keep their name
and role but get the seed password again.
"""

import logging

from sqlmodel import Session

from equinox.auth.service import find_user_by_email
from equinox.core.security import hash_password
from equinox.core.settings import get_settings
from equinox.ops.runner import cli
from equinox.user.models import User, UserRole

logger = logging.getLogger("equinox.ops.seed-users")

SEED_USERS = (
    ("admin@example.com", "Admin User", UserRole.Admin),
    ("john.doe@example.com", "John Doe", UserRole.User),
    ("jane.smith@example.com", "Jane Smith", UserRole.User),
)


def seed_users(session: Session, password: str) -> list[User]:
    hashed = hash_password(password)
    seeded = []
    for email, name, role in SEED_USERS:
        user = find_user_by_email(session, email)
        if user is None:
            user = User(email=email, name=name, role=role, password=hashed)
            logger.info("Creating %s", email)
        else:
            user.password = hashed
            logger.info("Refreshing password for %s", email)
        session.add(user)
        seeded.append(user)
    session.commit()
    for user in seeded:
        session.refresh(user)
    return seeded


def report(session: Session) -> list[User]:
    print("Seeding database...")
    users = seed_users(session, get_settings().ops_seed_password)
    for user in users:
        print({"id": str(user.id), "email": user.email, "name": user.name, "role": user.role.value})
    return users


def main() -> None:
    cli("seed-users", report)


if __name__ == "__main__":
    main()
