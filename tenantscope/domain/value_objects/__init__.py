"""Domain value objects."""

from tenantscope.domain.value_objects.tenancy import (
    DomainContext,
    ParsedHost,
    RequestContext,
    TenantContext,
    TenantScope,
)

__all__ = [
    "DomainContext",
    "ParsedHost",
    "RequestContext",
    "TenantContext",
    "TenantScope",
]
