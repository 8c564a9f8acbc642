"""Request / response logging middleware using structlog.

Each request gets a request id (taken from ``x-request-id`` or generated)
bound into structlog's context variables, so every event logged while the
request is handled (assembly, adapter fallback, LLM calls) carries it.
"""

from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from prompt_factory.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs every HTTP request with timing and response status."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        logger.info("request_started")
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "request_failed",
                elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise

        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        log_fn = logger.info if response.status_code < 400 else logger.warning
        log_fn("request_completed", status_code=response.status_code, elapsed_ms=elapsed_ms)

        response.headers["x-request-id"] = request_id
        return response
