"""User domain schemas.

Response schemas for user records. The password hash is never part of
any of them.
"""

import uuid
from datetime import UTC, datetime

from pydantic import EmailStr, field_serializer
from sqlmodel import SQLModel

from equinox.user.models import UserRole


def _to_utc_z(value: datetime) -> str:
    """Format datetime as ISO 8601 in UTC with a Z suffix.

    Naive values are assumed to already be UTC (SQLite drops tzinfo).
    """
    if value.tzinfo is not None:
        utc_value = value.astimezone(UTC)
    else:
        utc_value = value.replace(tzinfo=UTC)
    return utc_value.replace(microsecond=0).isoformat().replace("+00:00", "Z")


class UserPublicRead(SQLModel):
    """User record as returned by the API."""

    id: uuid.UUID
    email: EmailStr
    name: str
    role: UserRole
    must_change_password: bool
    last_login: datetime | None
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return _to_utc_z(value)

    @field_serializer("last_login")
    def serialize_last_login(self, value: datetime | None) -> str | None:
        return _to_utc_z(value) if value is not None else None
