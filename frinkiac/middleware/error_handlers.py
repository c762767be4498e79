"""Exception handlers rendering FrinkiacException as structured JSON."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from frinkiac.exceptions import ErrorCode, FrinkiacException, LayoutException
from frinkiac.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def error_event_type(exc: FrinkiacException) -> str:
    """Map an exception to the ``event_type`` used in the JSON log.

    Layout errors come from bad grid input sent by the caller; everything
    else originates upstream at Frinkiac.
    """
    if isinstance(exc, LayoutException):
        return "layout_error"
    if exc.code == ErrorCode.FRINKIAC_PARSE_ERROR:
        return "frinkiac_parse_error"
    return "frinkiac_upstream_error"


async def frinkiac_exception_handler(request: Request, exc: FrinkiacException) -> JSONResponse:
    """Render ``{"error": {code, message, details}}`` with the exception's status code.

    Caller mistakes (4xx) are logged at info level, upstream failures at warning.
    """
    log_with_context(
        logger,
        "info" if exc.status_code < 500 else "warning",
        "Request failed",
        error_code=exc.code.value,
        error_message=exc.message,
        error_details=exc.details,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
        event_type=error_event_type(exc),
    )

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}
    return JSONResponse(status_code=exc.status_code, content={"error": error_content})


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the traceback and return a generic 500."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        path=request.url.path,
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the Frinkiac, fallback and rate-limit handlers."""
    app.add_exception_handler(FrinkiacException, frinkiac_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
