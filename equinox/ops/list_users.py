"""Print every user as a table (id, email, name, role)."""

from typing import Any

from sqlmodel import Session, select

from equinox.ops.runner import cli, format_table
from equinox.user.models import User

COLUMNS = ("id", "email", "name", "role")


def user_rows(session: Session) -> list[dict[str, Any]]:
    users = session.exec(select(User).order_by(User.created_at, User.email)).all()
    return [
        {"id": str(u.id), "email": u.email, "name": u.name, "role": u.role.value}
        for u in users
    ]


def report(session: Session) -> list[dict[str, Any]]:
    print("Listing Users...")
    rows = user_rows(session)
    print(format_table(rows, COLUMNS))
    return rows


def main() -> None:
    cli("list-users", report)


if __name__ == "__main__":
    main()
