"""Error Handlers — global exception handlers for the game API.

Invariants:
    - TicTacToeError → its http_status with {message, error: {...}} envelope
    - RequestValidationError → 400 ValidationFailedError envelope with field details
    - Exception (catch-all) → 500 InternalError envelope, never leaks internal details

Design Decisions:
    - Every envelope comes from a core.errors class via to_response(), so the
      three handlers cannot drift apart in shape
    - Client errors logged at WARNING, server errors at ERROR
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from tictactoe.core.errors import (
    TicTacToeError, ValidationFailedError, InternalError, ErrorContext,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TicTacToeError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def _respond(exc: TicTacToeError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _domain_error_handler(request: Request, exc: TicTacToeError):
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(
        level,
        f"{type(exc).__name__}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "game_id": exc.context.game_id,
        },
    )
    return _respond(exc)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError,
):
    """Re-express request parsing failures as a ValidationFailedError."""
    error = ValidationFailedError(
        details=_field_details(exc),
        context=ErrorContext(operation=f"{request.method} {request.url.path}"),
    )
    logger.warning(
        f"Validation error on {request.url.path}: {error.details}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _respond(error)


async def _unhandled_error_handler(request: Request, exc: Exception):
    error = InternalError(
        context=ErrorContext(operation=f"{request.method} {request.url.path}"),
    )
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _respond(error)


def _field_details(exc: RequestValidationError) -> list[dict]:
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
