"""Quick look at the users and the ingestion staging table."""

import uuid
from dataclasses import asdict, dataclass, field

from sqlalchemy import func
from sqlmodel import Session, select

from equinox.ingestion.models import ImportStaging
from equinox.ops.runner import cli
from equinox.user.models import User


@dataclass(frozen=True)
class UserSample:
    id: uuid.UUID
    email: str


@dataclass
class DatabaseSnapshot:
    user_count: int
    sample_user: UserSample | None
    staging_count: int
    latest_staging: list[ImportStaging] = field(default_factory=list)


def snapshot(session: Session, *, staging_samples: int = 2) -> DatabaseSnapshot:
    user_count = session.exec(select(func.count()).select_from(User)).one()
    first = session.exec(select(User.id, User.email).limit(1)).first()
    staging_count = session.exec(select(func.count()).select_from(ImportStaging)).one()
    latest = session.exec(
        select(ImportStaging)
        .order_by(ImportStaging.created_at.desc(), ImportStaging.id.desc())
        .limit(staging_samples)
    ).all()
    return DatabaseSnapshot(
        user_count=user_count,
        sample_user=UserSample(id=first[0], email=first[1]) if first else None,
        staging_count=staging_count,
        latest_staging=list(latest),
    )


def report(session: Session) -> DatabaseSnapshot:
    snap = snapshot(session)
    print(f"Users in DB: {snap.user_count}")
    print("Sample User:", asdict(snap.sample_user) if snap.sample_user else None)
    print(f"Staging Rows: {snap.staging_count}")
    print("Sample Staging:", [row.model_dump() for row in snap.latest_staging])
    return snap


def main() -> None:
    cli("check-db", report)


if __name__ == "__main__":
    main()
