"""Apply the raw SQL that creates the server-side session table.

The script is executed statement by statement inside one transaction, so a
failure leaves nothing half-applied on databases with transactional DDL.
"""

from pathlib import Path

import sqlparse
from sqlmodel import Session

from equinox.core.settings import get_settings
from equinox.ops.runner import cli

DEFAULT_SQL_PATH = Path(__file__).parent / "sql" / "session_table.sql"


def split_sql_statements(script: str) -> list[str]:
    """Split a SQL script into statements, without comments or the trailing ``;``.

    Semicolons inside string literals and comments do not end a statement.
    """
    statements = []
    for raw in sqlparse.split(script):
        statement = sqlparse.format(raw, strip_comments=True).strip().rstrip(";").strip()
        if statement:
            statements.append(statement)
    return statements


def apply_sql_file(session: Session, path: Path) -> int:
    """Execute every statement in ``path``; returns how many ran."""
    statements = split_sql_statements(path.read_text(encoding="utf-8"))
    connection = session.connection()
    for statement in statements:
        connection.exec_driver_sql(statement)
    session.commit()
    return len(statements)


def report(session: Session) -> int:
    path = get_settings().session_sql_path or DEFAULT_SQL_PATH
    count = apply_sql_file(session, path)
    print(f"Session table created successfully ({count} statements from {path.name})")
    return count


def main() -> None:
    cli("migrate-session", report)


if __name__ == "__main__":
    main()
