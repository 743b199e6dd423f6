"""Drilling operations models."""

import uuid
from datetime import datetime

from sqlmodel import Field, SQLModel

from equinox.core.mixins import TimestampMixin, utc_now


class DrillingEntry(TimestampMixin, SQLModel, table=True):
    """One shift of drilling on one rig."""

    __tablename__: str = "drilling_entries"

    id: int | None = Field(default=None, primary_key=True)
    date: datetime = Field(default_factory=utc_now)
    shift: str = Field(default="Day", max_length=10)
    rig_id: int | None = Field(default=None, index=True)
    project_id: int | None = Field(default=None)
    meters_drilled: float = Field(default=0)
    total_shift_hours: float = Field(default=12)
    drilling_hours: float = Field(default=0)
    status: str = Field(default="Approved", max_length=20)
    created_by_id: uuid.UUID | None = Field(default=None, foreign_key="users.id")
