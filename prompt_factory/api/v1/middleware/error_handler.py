"""Global error-handling middleware.

Catches application-specific exceptions and translates them into
structured JSON error responses with appropriate HTTP status codes.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from prompt_factory.utils.exceptions import (
    FormValidationError,
    InvalidCredentialsError,
    LLMError,
    MissingCredentialsError,
    PromptFactoryError,
    ResponseParseError,
)
from prompt_factory.utils.logging import get_logger

logger = get_logger(__name__)

# Map exception types to HTTP status codes.
_STATUS_MAP: dict[type, int] = {
    FormValidationError: 422,
    MissingCredentialsError: 400,
    InvalidCredentialsError: 400,
    LLMError: 502,
    ResponseParseError: 502,
}

# Upstream statuses passed through as-is; anything else is a bad gateway.
_PASSTHROUGH_LLM_STATUS = {401, 429}


def status_for(exc: PromptFactoryError) -> int:
    if isinstance(exc, LLMError) and exc.status_code in _PASSTHROUGH_LLM_STATUS:
        return exc.status_code
    return _STATUS_MAP.get(type(exc), 500)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware that wraps every request in a try/except and converts
    known exceptions to JSON error responses.

    Unknown exceptions are logged and returned as HTTP 500.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)

        except PromptFactoryError as exc:
            status_code = status_for(exc)
            logger.warning(
                "handled_error",
                error_type=type(exc).__name__,
                status_code=status_code,
                detail=str(exc),
                path=request.url.path,
            )
            content: dict = {"error": type(exc).__name__, "detail": str(exc)}
            if isinstance(exc, FormValidationError):
                content["issues"] = [issue.model_dump() for issue in exc.issues]
            return JSONResponse(status_code=status_code, content=content)

        except Exception as exc:
            logger.error(
                "unhandled_error",
                error_type=type(exc).__name__,
                detail=str(exc),
                path=request.url.path,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "InternalServerError",
                    "detail": "An unexpected error occurred.  Please try again later.",
                },
            )
