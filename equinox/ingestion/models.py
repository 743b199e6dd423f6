"""Ingestion staging models.

Spreadsheet uploads land here row by row, tagged with a batch id, before
they are validated and committed as drilling entries.
"""

import uuid
from enum import Enum
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from equinox.core.mixins import TimestampMixin


class StagingStatus(str, Enum):
    """Lifecycle of a staged row.

    - Pending: uploaded, not yet committed
    - Imported: committed as a DrillingEntry
    - Error: failed validation
    """

    Pending = "Pending"
    Imported = "Imported"
    Error = "Error"


class ImportStaging(TimestampMixin, SQLModel, table=True):
    __tablename__: str = "import_staging"

    id: int | None = Field(default=None, primary_key=True)
    batch_id: str = Field(index=True, max_length=64)
    row_number: int = Field(default=0)
    raw_data: dict[str, Any] = Field(
        default_factory=dict, sa_column=Column(JSON, nullable=False)
    )
    status: StagingStatus = Field(default=StagingStatus.Pending, max_length=20)
    uploaded_by_id: uuid.UUID | None = Field(default=None, foreign_key="users.id")
