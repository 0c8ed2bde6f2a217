from __future__ import annotations

import time
from collections.abc import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import get_logger, set_request_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags every log line of a request with its id and logs start/end."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        structlog.contextvars.clear_contextvars()
        rid = set_request_id(request.headers.get("X-Request-ID"))

        log = get_logger().bind(path=request.url.path, method=request.method)
        log.info("request.start")

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request.error")
            raise

        duration_ms = (time.perf_counter() - started) * 1000.0
        response.headers["X-Request-ID"] = rid
        log.info(
            "request.end",
            status_code=response.status_code,
            duration_ms=round(duration_ms, 2),
        )
        return response
