"""Domain exceptions for tenantscope.

Host parsing and tenant resolution never raise; these exceptions come
from the persistence layer and the HTTP surface. Presentation layer maps
them to HTTP responses in exception handlers.
"""

from typing import Any


class TenantScopeException(Exception):
    """Base exception for all tenantscope errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error body."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ResourceNotFoundException(TenantScopeException):
    """Raised when a requested resource is not found (or belongs to another tenant)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. model name).
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TenantNotFoundException(TenantScopeException):
    """Raised when a tenant slug or domain does not map to a tenant."""

    def __init__(self, identifier: str) -> None:
        super().__init__(
            f"Tenant not found: {identifier}",
            "TENANT_NOT_FOUND",
            {"identifier": identifier},
        )


class SqlNotConfiguredException(TenantScopeException):
    """Raised when an operation requires a SQL database that is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
