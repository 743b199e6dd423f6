"""Count drilling entries, overall and over the last two weeks."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy import func
from sqlmodel import Session, select

from equinox.core.mixins import utc_now
from equinox.drilling.models import DrillingEntry
from equinox.ops.runner import cli

RECENT_DAYS = 14


@dataclass(frozen=True)
class DrillingCounts:
    total: int
    recent: int
    since: datetime


def count_drilling_entries(
    session: Session, *, days: int = RECENT_DAYS, now: datetime | None = None
) -> DrillingCounts:
    since = (now or utc_now()) - timedelta(days=days)
    total = session.exec(select(func.count()).select_from(DrillingEntry)).one()
    recent = session.exec(
        select(func.count())
        .select_from(DrillingEntry)
        .where(DrillingEntry.created_at >= since)
    ).one()
    return DrillingCounts(total=total, recent=recent, since=since)


def report(session: Session) -> DrillingCounts:
    print("Checking DrillingEntry count...")
    counts = count_drilling_entries(session)
    print("DrillingEntry count:", counts.total)
    print(f"Recent DrillingEntry count ({RECENT_DAYS} days):", counts.recent)
    return counts


def main() -> None:
    cli("check-data", report)


if __name__ == "__main__":
    main()
