"""Shared dependency type aliases for FastAPI routes.

Auth-specific dependencies live in `equinox.auth.dependencies`.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from equinox.core.settings import Settings, get_settings
from equinox.db.engine import get_session

SessionDep = Annotated[Session, Depends(get_session)]

SettingsDep = Annotated[Settings, Depends(get_settings)]
