"""Reusable model mixins and the UTC clock they share."""

from datetime import UTC, datetime

from sqlalchemy import text
from sqlmodel import Field


def utc_now() -> datetime:
    """Current UTC time, whole seconds."""
    return datetime.now(UTC).replace(microsecond=0)


class TimestampMixin:
    """Adds ``created_at``/``updated_at`` to a table model.

    ``created_at`` drives the recency filters of the inspection tools, so it
    is set client-side as well as by the server default.

    Usage:
        class DrillingEntry(TimestampMixin, SQLModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
    """

    created_at: datetime = Field(
        default_factory=utc_now,
        index=True,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={
            "server_default": text("CURRENT_TIMESTAMP"),
            "onupdate": utc_now,
        },
    )
