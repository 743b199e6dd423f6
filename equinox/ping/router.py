"""Ping domain router.

Liveness endpoint: answers every method on every path under /ping without
touching the database, echoing back what it received.
"""

import threading
from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import APIRouter, Request

from equinox.core.constants import Routes

PING_STATUS = "pong"
PING_MESSAGE = "Equinox API is alive!"
PING_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def _utc_now() -> datetime:
    return datetime.now(UTC)


class MonotonicClock:
    """Wall-clock ISO timestamps that never go backwards within a process.

    If the system clock steps back, the last issued value is repeated until
    the clock catches up.
    """

    def __init__(self, now: Callable[[], datetime] = _utc_now) -> None:
        self._now = now
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._now()
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
            return current

    def isoformat(self) -> str:
        """Millisecond precision with a Z suffix, e.g. 2026-01-19T12:34:56.789Z."""
        return (
            self.now()
            .astimezone(UTC)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )


clock = MonotonicClock()

router = APIRouter(prefix=Routes.PING.prefix, tags=[Routes.PING.tag])


def _request_target(request: Request) -> str:
    """Path plus query string exactly as sent on the request line (still percent-encoded)."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


@router.api_route("", methods=PING_METHODS)
@router.api_route("/{path:path}", methods=PING_METHODS, include_in_schema=False)
def ping(request: Request):
    return {
        "status": PING_STATUS,
        "message": PING_MESSAGE,
        "url": _request_target(request),
        "method": request.method,
        "timestamp": clock.isoformat(),
    }
