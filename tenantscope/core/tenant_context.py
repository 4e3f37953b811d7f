"""Request-scoped tenancy state using contextvars.

Middleware records the current request (host, session, query params) and
the tenant initialized by the tenancy package (X-Tenant-ID header or JWT
claim). The resolver reads these through an explicit RequestContext
snapshot or a TenancyPackage, never through module globals.
"""

from contextvars import ContextVar
from typing import Any

from tenantscope.domain.value_objects import RequestContext

# Tenant initialized by the tenancy package for this request/task.
current_tenant_id: ContextVar[int | str | None] = ContextVar(
    "current_tenant_id", default=None
)
_current_request: ContextVar[RequestContext | None] = ContextVar(
    "current_request", default=None
)


def set_tenant_id(tenant_id: int | str | None) -> None:
    """Initialize (or end, with None) the package tenant for this context."""
    current_tenant_id.set(tenant_id)


def get_tenant_id() -> int | str | None:
    """Return the package tenant ID if initialized."""
    return current_tenant_id.get()


def set_request_context(context: RequestContext | None) -> None:
    """Record the current request snapshot (None clears it)."""
    _current_request.set(context)


def get_request_context() -> RequestContext | None:
    """Return the current request snapshot, or None outside a request."""
    return _current_request.get()


class ContextVarTenancy:
    """Tenancy package backed by the current_tenant_id context variable.

    A tenant counts as initialized once middleware (or a queue worker)
    has called set_tenant_id with a non-empty value.
    """

    def initialized(self) -> bool:
        value = current_tenant_id.get()
        return value is not None and value != ""

    def tenant_key(self) -> Any:
        return current_tenant_id.get()
