"""Health domain router.

Readiness check for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import func, text
from sqlmodel import select

from equinox.core.constants import CommonResponses, Routes
from equinox.core.deps import SessionDep, SettingsDep
from equinox.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=Routes.HEALTH.prefix,
    tags=[Routes.HEALTH.tag],
    responses={**CommonResponses.UNAVAILABLE},
)


@router.get("")
def health(session: SessionDep, settings: SettingsDep):
    """Health check with database connectivity verification."""
    try:
        session.exec(text("SELECT 1"))
        user_count = session.exec(select(func.count()).select_from(User)).one()
    except Exception as e:
        logger.warning("Health check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "database": "error"},
        )
    return {
        "status": "ok",
        "database": "ok",
        "user_count": user_count,
        "env": settings.env_name,
    }
