"""HTTP request/response logging middleware."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable
from typing import Any

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Liveness probes hit these every few seconds; only failures are logged.
DEFAULT_QUIET_PATHS = ("/ping", "/health")


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _is_quiet(path: str, quiet_paths: tuple[str, ...]) -> bool:
    return any(path == p or path.startswith(p + "/") for p in quiet_paths)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI, quiet_paths: Iterable[str] = ()) -> None:
        super().__init__(app)
        self.logger = logging.getLogger("equinox.request")
        self.quiet_paths = tuple(quiet_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = response.status_code if response is not None else None
            failed = status_code is None or status_code >= 500

            if failed or not _is_quiet(request.url.path, self.quiet_paths):
                extra: dict[str, Any] = {
                    "method": request.method,
                    "path": request.url.path,
                    "query": request.url.query,
                    "status_code": status_code,
                    "duration_ms": round(duration_ms, 2),
                    "client_ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                }
                log = self.logger.error if failed else self.logger.info
                log(
                    "%s %s -> %s (%.2fms)",
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                    extra=extra,
                )


def add_request_logging_middleware(app: FastAPI) -> None:
    """Attach request logging middleware (enabled by default).

    LOG_QUIET_PATHS is a comma-separated list of path prefixes whose
    successful requests are not logged (default: /ping,/health).
    """

    if not _env_bool("LOG_REQUESTS", default=True):
        return
    raw = os.getenv("LOG_QUIET_PATHS")
    if raw is None:
        quiet_paths: tuple[str, ...] = DEFAULT_QUIET_PATHS
    else:
        quiet_paths = tuple(p.strip() for p in raw.split(",") if p.strip())
    app.add_middleware(RequestLoggingMiddleware, quiet_paths=quiet_paths)
