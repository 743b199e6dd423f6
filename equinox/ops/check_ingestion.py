"""Report how many rows the spreadsheet ingestion has staged."""

import logging
from dataclasses import dataclass

from sqlalchemy import func
from sqlmodel import Session, select

from equinox.ingestion.models import ImportStaging, StagingStatus
from equinox.ops.runner import cli

logger = logging.getLogger("equinox.ops.check-ingestion")


@dataclass(frozen=True)
class IngestionStatus:
    total_rows: int
    latest_batch_id: str | None = None
    latest_status: StagingStatus | None = None


def ingestion_status(session: Session) -> IngestionStatus:
    total = session.exec(select(func.count()).select_from(ImportStaging)).one()
    if total == 0:
        return IngestionStatus(total_rows=0)

    last = session.exec(
        select(ImportStaging).order_by(
            ImportStaging.created_at.desc(), ImportStaging.id.desc()
        )
    ).first()
    return IngestionStatus(
        total_rows=total,
        latest_batch_id=last.batch_id if last else None,
        latest_status=last.status if last else None,
    )


def report(session: Session) -> IngestionStatus:
    status = ingestion_status(session)
    print(f"TOTAL_IMPORTED_ROWS: {status.total_rows}")
    if status.total_rows > 0:
        print("LATEST_BATCH_ID:", status.latest_batch_id)
        print("LATEST_STATUS:", status.latest_status.value if status.latest_status else None)
    else:
        print("No data found in ImportStaging table.")
    return status


def main() -> None:
    cli("check-ingestion", report)


if __name__ == "__main__":
    main()
