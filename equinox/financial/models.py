"""Financial parameter models.

Cost factors applied per rig and/or project when estimating drilling cost.
A row with neither rig nor project set is the fleet-wide default.
"""

from sqlmodel import Field, SQLModel

from equinox.core.mixins import TimestampMixin


class FinancialParam(TimestampMixin, SQLModel, table=True):
    __tablename__: str = "financial_params"

    id: int | None = Field(default=None, primary_key=True)
    rig_id: int | None = Field(default=None)
    project_id: int | None = Field(default=None)
    cost_per_meter: float = Field(default=0)
    fuel_cost_factor: float = Field(default=1)
    consumables_factor: float = Field(default=1)
    labor_cost_factor: float = Field(default=1)
