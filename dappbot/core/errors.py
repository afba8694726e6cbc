"""Error Hierarchy — typed, categorized exceptions for request-handling failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) render through user_error_response;
      infrastructure errors (500-level) through unexpected_error_response
    - The rendered err body always carries `message`
    - No internal details leaked in user-facing messages

Design Decisions:
    - Guards and the envelope builder never raise; these exceptions belong to the
      request-handling shell, which converts them back into envelopes
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from dappbot.core.responses import (
    ApiResponse,
    ResponseOptions,
    error_body,
    unexpected_error_response,
    user_error_response,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PAYMENT = "payment"
    PERMISSION = "permission"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    dapp_name: str | None = None
    owner_email: str | None = None
    debug_info: dict[str, Any] | None = None


class DappbotError(Exception):
    """Base exception for all request-handling errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_error_body(self) -> dict:
        return error_body(
            self.message,
            code=self.code,
            category=self.category.value,
            severity=self.severity.value,
            timestamp=self.context.timestamp.isoformat(),
        )

    def to_response(self) -> ApiResponse:
        """Render as an error envelope carrying this error's status code."""
        opts = ResponseOptions(error_response_code=self.http_status)
        if self.http_status < 500:
            return user_error_response(self.to_error_body(), opts)
        return unexpected_error_response(self.to_error_body(), opts)


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidBodyError(DappbotError):
    """Request body did not match the expected contract shape."""
    def __init__(self, shape: str, context: ErrorContext | None = None):
        super().__init__(
            f"Request body is not a valid {shape}",
            "INVALID_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.shape = shape


class AuthorizationError(DappbotError):
    """Caller is not authenticated."""
    def __init__(self, message: str = "Unauthorized", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class PaymentRequiredError(DappbotError):
    """Account payment status does not allow the operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PAYMENT_REQUIRED", ErrorCategory.PAYMENT,
            ErrorSeverity.ERROR, context, 402,
        )


class ForbiddenError(DappbotError):
    """Caller is authenticated but may not act on the resource."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.PERMISSION,
            ErrorSeverity.ERROR, context, 403,
        )


class ResourceNotFoundError(DappbotError):
    """Resource does not exist, for operations other than a read.

    Reads report absence with `exists: false` on a success envelope instead.
    """
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class ConflictError(DappbotError):
    """Resource already exists or is mid-transition."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(DappbotError):
    """A collaborator we expected to succeed did not."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
