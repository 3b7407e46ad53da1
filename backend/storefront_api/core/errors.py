"""Error Hierarchy: typed, categorized exceptions for every storefront API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Three disjoint request failure classes: identification (500),
      validation (400), domain/delegate (500 unless reconfigured)
    - to_response() produces the REST envelope used by the dispatcher and the
      FastAPI exception handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StorefrontApiError base: one envelope shape for
      every failure the dispatcher maps
    - ErrorContext as dataclass: request metadata for observability without
      coupling to the logging framework
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
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request context attached to an error once the dispatcher knows it."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    shop_domain: str | None = None
    operation: str | None = None
    method: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class StorefrontApiError(Exception):
    """Base exception for all storefront API errors."""

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
                    "shop_domain": self.context.shop_domain,
                    "operation": self.context.operation,
                    "method": self.context.method,
                    "path": self.context.path,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class RequestValidationFailed(StorefrontApiError):
    """Path, query or body did not match the operation's schema."""
    def __init__(
        self,
        details: list[dict[str, str]],
        context: ErrorContext | None = None,
    ):
        super().__init__(
            "Invalid request data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


class RouteNotFoundError(StorefrontApiError):
    """No operation matches the request's method and path."""
    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"No operation for {method} {path}",
            "ROUTE_NOT_FOUND", ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Identification & Configuration Errors (500-level) ──────────

class ShopDomainMissingError(StorefrontApiError):
    """Tenant-identifying header absent from the request."""
    def __init__(self, header_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{header_name} header is required",
            "SHOP_DOMAIN_MISSING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 500,
        )
        self.header_name = header_name


class ClientFactoryError(StorefrontApiError):
    """Storefront client factory is not configured or cannot be imported."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CLIENT_FACTORY_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )


# ─── Domain & Delegate Errors ───────────────────────────────────

class ResourceNotFoundError(StorefrontApiError):
    """Find-by-handle capability reported the resource as absent.

    Status stays 500 unless the dispatcher is built with another
    not_found_status.
    """
    def __init__(
        self, resource_type: str, handle: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 500,
        )
        self.resource_type = resource_type
        self.handle = handle


class StorefrontUnreachableError(StorefrontApiError):
    """Fetching the storefront's public pages failed."""
    def __init__(self, domain: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storefront {domain} could not be fetched: {reason}",
            "STOREFRONT_UNREACHABLE", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 500,
        )
        self.domain = domain


# ─── Construction Errors (never reach a request) ────────────────

class DuplicateOperationError(ValueError):
    """Two endpoint builders define the same operation identity."""
    def __init__(self, identity: str):
        super().__init__(f"Operation defined more than once: {identity}")
        self.identity = identity


def internal_error_response() -> dict:
    """Envelope for unexpected failures. Never carries the original message."""
    return {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": ErrorCategory.INTERNAL.value,
            "severity": ErrorSeverity.CRITICAL.value,
        },
    }
