"""List the tables the database actually has and count the key ones."""

from dataclasses import dataclass

from sqlalchemy import func, inspect
from sqlmodel import Session, select

from equinox.financial.models import FinancialParam
from equinox.ops.runner import cli
from equinox.user.models import User


@dataclass(frozen=True)
class TableReport:
    tables: list[str]
    financial_param_count: int
    user_count: int


def table_report(session: Session) -> TableReport:
    tables = sorted(inspect(session.get_bind()).get_table_names())
    financial = session.exec(select(func.count()).select_from(FinancialParam)).one()
    users = session.exec(select(func.count()).select_from(User)).one()
    return TableReport(tables=tables, financial_param_count=financial, user_count=users)


def report(session: Session) -> TableReport:
    print("Checking tables...")
    result = table_report(session)
    print("Tables in DB:", result.tables)
    print("FinancialParam count:", result.financial_param_count)
    print("User count:", result.user_count)
    return result


def main() -> None:
    cli("check-tables", report)


if __name__ == "__main__":
    main()
