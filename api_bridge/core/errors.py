"""Error Hierarchy - typed, categorized failures for load and save.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Three kinds only: TransportFailure, DecodeFailure, ValidationFailure
    - TransportFailure carries no sub-cause; the transport collapses them before
      this error is built
    - user_message is Spanish text safe to show on screen (no internal details)

Design Decisions:
    - Single hierarchy with ApiBridgeError base: callers catch one type
    - ErrorContext as dataclass: request details for logs without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    DECODE = "decode"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Request details attached to an error for logs and display."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    method: str | None = None
    path: str | None = None
    person_id: int | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ApiBridgeError(Exception):
    """Base exception for all Api Bridge failures."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def user_message(self) -> str:
        return self.context.user_message or self.message

    def to_dict(self) -> dict:
        """Flat representation for logs and presentation."""
        return {
            "code": self.code,
            "message": self.message,
            "user_message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "method": self.context.method,
            "path": self.context.path,
            "person_id": self.context.person_id,
            "debug_info": self.context.debug_info,
        }


class TransportFailure(ApiBridgeError):
    """Request produced no result (network error, malformed URL or empty body)."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.method = method
        ctx.path = path
        if ctx.user_message is None:
            ctx.user_message = "No se pudo contactar al servidor."
        super().__init__(
            f"{method} {path} returned no result",
            "TRANSPORT_FAILURE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ctx,
        )


class DecodeFailure(ApiBridgeError):
    """Response text is not JSON or not shaped as expected."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if ctx.user_message is None:
            ctx.user_message = "La respuesta del servidor no es válida."
        ctx.debug_info = {**(ctx.debug_info or {}), "reason": reason}
        super().__init__(
            f"Could not decode response: {reason}",
            "DECODE_FAILURE", ErrorCategory.DECODE,
            ErrorSeverity.ERROR, ctx,
        )
        self.reason = reason


class ValidationFailure(ApiBridgeError):
    """Required draft fields are empty after trimming."""
    def __init__(self, fields: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if ctx.user_message is None:
            ctx.user_message = "Nombre y apellido son obligatorios."
        super().__init__(
            f"Required fields are empty: {', '.join(fields)}",
            "VALIDATION_FAILURE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx,
        )
        self.fields = fields
