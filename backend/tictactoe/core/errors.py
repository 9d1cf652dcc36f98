"""Error Hierarchy — typed, categorized exceptions for the game service.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; InternalError (500) is critical
    - to_response() produces the REST envelope; extensions feeds GraphQL errors
    - The top-level "message" of a REST envelope is the user-facing message

Design Decisions:
    - Single hierarchy with TicTacToeError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    game_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TicTacToeError(Exception):
    """Base exception for all game service errors."""

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

    @property
    def extensions(self) -> dict:
        """GraphQL error extensions (picked up by graphql-core)."""
        return {"code": self.code, "category": self.category.value}

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "message": self.message,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "game_id": self.context.game_id,
                    "operation": self.context.operation,
                },
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(TicTacToeError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class GameNotFoundError(ResourceNotFoundError):
    """No game is stored under the given id."""
    def __init__(
        self, game_id: str, operation: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.game_id = game_id
        ctx.operation = operation
        super().__init__("Game", game_id, "GAME_NOT_FOUND", ctx)


class ValidationFailedError(TicTacToeError):
    """Request or field values rejected before reaching the store."""
    def __init__(
        self,
        message: str = "Invalid request data",
        details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details or []

    def to_response(self) -> dict:
        body = super().to_response()
        body["error"]["details"] = self.details
        return body


# ─── Internal Errors (500-level) ────────────────────────────────

class InternalError(TicTacToeError):
    """Unexpected failure; the message never carries internal details."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
