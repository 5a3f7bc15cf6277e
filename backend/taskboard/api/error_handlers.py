"""Error Handlers — every failure leaves the API in the TaskboardError envelope.

Invariants:
    - Err results raised by the routes, request-shape failures and unexpected
      exceptions all render through TaskboardError.to_response()
    - Request-shape failures are ValidationErrors naming the first bad field,
      with the full pydantic error list under "details"
    - Unexpected exceptions never leak their message to the caller
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskboard.core.errors import (
    ErrorCategory, ErrorSeverity, TaskboardError, ValidationError,
)

logger = logging.getLogger(__name__)


def _render(error: TaskboardError, extra: dict | None = None) -> JSONResponse:
    body = error.to_response()
    if extra:
        body["error"].update(extra)
    return JSONResponse(status_code=error.http_status, content=body)


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain, request-shape and catch-all handlers."""

    @app.exception_handler(TaskboardError)
    async def taskboard_error_handler(request: Request, exc: TaskboardError):
        level = logging.INFO if exc.recoverable else logging.ERROR
        logger.log(
            level,
            f"{exc.code}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return _render(exc)

    @app.exception_handler(RequestValidationError)
    async def request_shape_handler(request: Request, exc: RequestValidationError):
        problems = exc.errors()
        first = _field_path(problems[0]["loc"]) if problems else "body"
        error = ValidationError("Invalid request data", first)
        logger.warning(
            f"Malformed request on {request.url.path}: {first}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        details = [
            {"field": _field_path(p["loc"]), "message": p["msg"], "type": p["type"]}
            for p in problems
        ]
        return _render(error, {"details": details})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        error = TaskboardError(
            "An unexpected error occurred", "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        )
        return _render(error)
