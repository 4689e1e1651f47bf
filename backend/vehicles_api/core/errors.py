"""Error Hierarchy — typed, categorized exceptions for all Vehicles API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with VehiclesError base: one global handler maps all of them
    - ErrorContext as dataclass: observability data without coupling to logging
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class VehiclesError(Exception):
    """Base exception for all Vehicles API errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(VehiclesError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        code: str = "RESOURCE_NOT_FOUND", context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class CarNotFoundError(ResourceNotFoundError):
    """No car stored under the given id."""
    def __init__(self, car_id: int, context: ErrorContext | None = None):
        super().__init__("Car", car_id, "CAR_NOT_FOUND", context)
        self.car_id = car_id


class ManufacturerNotFoundError(ResourceNotFoundError):
    """No manufacturer stored under the given code."""
    def __init__(self, code: int, context: ErrorContext | None = None):
        super().__init__("Manufacturer", code, "MANUFACTURER_NOT_FOUND", context)
        self.manufacturer_code = code


class CarIdMismatchError(VehiclesError):
    """PUT path id and body id refer to different cars."""
    def __init__(self, path_id: int, body_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Car"
        ctx.resource_id = str(path_id)
        ctx.debug_info = {"path_id": path_id, "body_id": body_id}
        super().__init__(
            "Path Car Id does not match Car Id in Body",
            "CAR_ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


class UnknownManufacturerError(VehiclesError):
    """Car references a manufacturer code that is not on file."""
    def __init__(self, code: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Manufacturer"
        ctx.resource_id = str(code)
        super().__init__(
            f"Unknown manufacturer code: {code}",
            "UNKNOWN_MANUFACTURER", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.manufacturer_code = code


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(VehiclesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
