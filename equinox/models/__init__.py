"""
Model package.

IMPORTANT (Alembic / SQLModel):
- Alembic autogenerate relies on `SQLModel.metadata`, which is populated only
  when the table models are imported.
- `equinox/alembic/env.py` imports `equinox.models`, so this module must import
  all SQLModel `table=True` models to register them.
"""

from equinox.drilling.models import DrillingEntry
from equinox.financial.models import FinancialParam
from equinox.ingestion.models import ImportStaging, StagingStatus
from equinox.user.models import User, UserRole

__all__ = [
    "DrillingEntry",
    "FinancialParam",
    "ImportStaging",
    "StagingStatus",
    "User",
    "UserRole",
]
