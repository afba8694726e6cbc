"""Error Handlers — global exception handlers rendering every failure as an envelope.

Invariants:
    - DappbotError → its own envelope and status (user error < 500 <= unexpected)
    - RequestValidationError → 400 user-error envelope with field-level details
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (DappbotError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py (ADR: ExMA import fan-out < 10)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from dappbot.api.responses import to_json_response
from dappbot.core.errors import DappbotError, ErrorCategory, ErrorSeverity
from dappbot.core.responses import (
    error_body, unexpected_error_response, user_error_response,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_dappbot_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_dappbot_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DappbotError)
    async def dappbot_error_handler(request: Request, exc: DappbotError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"DappbotError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
                "dapp_name": exc.context.dapp_name,
            },
        )
        return to_json_response(exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return to_json_response(
            user_error_response(_build_validation_error_body(exc)),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return to_json_response(unexpected_error_response(error_body(
            "An unexpected error occurred",
            code="INTERNAL_ERROR",
            category=ErrorCategory.INTERNAL.value,
            severity=ErrorSeverity.CRITICAL.value,
        )))


def _build_validation_error_body(exc: RequestValidationError) -> dict:
    return error_body(
        "Invalid request data",
        code="VALIDATION_ERROR",
        category=ErrorCategory.VALIDATION.value,
        severity=ErrorSeverity.ERROR.value,
        details=[
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    )
