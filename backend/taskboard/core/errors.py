"""Error Hierarchy — typed, categorized errors for all Taskboard failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable and travel as Err values, never raised
      by the stores; storage errors (500-level) are raised
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TaskboardError base: the same object can sit inside an
      Err result or be raised to the FastAPI global handler (uniform error shape)
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
    AUTHORIZATION = "authorization"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    EMPTY_COLLECTION = "empty_collection"
    STORAGE = "storage"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    caller: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TaskboardError(Exception):
    """Base exception for all Taskboard errors."""

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
    def recoverable(self) -> bool:
        return self.http_status < 500

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "recoverable": self.recoverable,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class AuthorizationError(TaskboardError):
    """Caller is not allowed to perform the operation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_AUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ValidationError(TaskboardError):
    """Operation input failed a content rule."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["field"] = self.field
        return response


class NotFoundError(TaskboardError):
    """Requested identifier is absent from its collection."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class EmptyCollectionError(TaskboardError):
    """Listing requested on a collection with no entries."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "EMPTY_COLLECTION", ErrorCategory.EMPTY_COLLECTION,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Storage Errors (500-level, raised) ─────────────────────────

class StorageLimitExceededError(TaskboardError):
    """Collection entry count or serialized value size bound exceeded."""
    def __init__(self, message: str, limit: int, context: ErrorContext | None = None):
        super().__init__(
            message, "STORAGE_LIMIT_EXCEEDED", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 507,
        )
        self.limit = limit


class IdSpaceExhaustedError(TaskboardError):
    """Identifier counter reached the top of the identifier range."""
    def __init__(self, collection: str, max_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"No identifiers left for {collection} (maximum {max_id})",
            "ID_SPACE_EXHAUSTED", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 507,
        )
        self.collection = collection
        self.max_id = max_id


class DatabaseError(TaskboardError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
