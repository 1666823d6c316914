"""Error Hierarchy — typed, categorized exceptions for all School Finder failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - ValidationError (400) is client-caused and non-retryable; StorageError (500) is critical
    - to_response() produces the REST envelope, always with success=False
    - No driver or internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SchoolFinderError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging framework
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
    DATABASE = "database"
    INTERNAL = "internal"


class ValidationReason(str, Enum):
    """Which input constraint failed."""
    MISSING = "missing"
    NOT_NUMERIC = "not_numeric"
    OUT_OF_RANGE = "out_of_range"
    INVALID_TEXT = "invalid_text"
    INVALID_BODY = "invalid_body"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class SchoolFinderError(Exception):
    """Base exception for all School Finder errors."""

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

    def details(self) -> dict | None:
        """Error-specific details for the envelope. Subclasses override."""
        return None

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        error = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
        }
        if self.context.path:
            error["path"] = self.context.path
        details = self.details()
        if details is not None:
            error["details"] = details
        return {"success": False, "error": error}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(SchoolFinderError):
    """Client-supplied input missing or malformed."""
    def __init__(
        self,
        message: str,
        field: str,
        reason: ValidationReason,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field
        self.reason = reason

    def details(self) -> dict:
        return {"field": self.field, "reason": self.reason.value}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(SchoolFinderError):
    """Record store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    def details(self) -> dict:
        return {"operation": self.operation}
