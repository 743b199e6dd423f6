"""User domain models.

SQLModel table definition for dashboard users.
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import EmailStr
from sqlmodel import Field, SQLModel

from equinox.core.mixins import TimestampMixin


class UserRole(str, Enum):
    """Dashboard roles.

    Member names equal their values because the database stores the name.
    ``User`` is the role given to seeded demo accounts; accounts created
    through registration use one of the other four.
    """

    Admin = "Admin"
    Supervisor = "Supervisor"
    Driller = "Driller"
    Viewer = "Viewer"
    User = "User"


REGISTRABLE_ROLES = (
    UserRole.Admin,
    UserRole.Supervisor,
    UserRole.Driller,
    UserRole.Viewer,
)


class User(TimestampMixin, SQLModel, table=True):
    """User database model.

    Note: ``password`` holds the bcrypt hash and must never be exposed in
    API responses.
    """

    __tablename__: str = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: EmailStr = Field(index=True, unique=True, max_length=255)
    name: str = Field(default="", max_length=100)
    role: UserRole = Field(default=UserRole.Viewer, max_length=20)
    password: str = Field(max_length=255)
    must_change_password: bool = Field(default=False)
    last_login: datetime | None = Field(default=None)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.Admin
