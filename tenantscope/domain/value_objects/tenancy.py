"""Immutable value objects for host parsing and tenant resolution."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tenantscope.domain.enums import DomainKind, TenantSource


@dataclass(frozen=True)
class ParsedHost:
    """Host split into an optional subdomain and the base domain.

    base_domain never contains the stripped subdomain. IP literals and
    "localhost" never carry a subdomain.
    """

    subdomain: str | None
    base_domain: str


@dataclass(frozen=True)
class RequestContext:
    """Snapshot of the request state tenant resolution may consult."""

    host: str | None = None
    session: Mapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant id and where it came from.

    Valid for one request/operation only; do not keep it across requests.
    """

    tenant_id: int | str | None
    source: TenantSource

    @classmethod
    def empty(cls) -> "TenantContext":
        """No tenant: scoping is skipped."""
        return cls(tenant_id=None, source=TenantSource.NONE)

    @property
    def has_tenant(self) -> bool:
        return self.tenant_id is not None


@dataclass(frozen=True)
class TenantScope:
    """Decision for one entity type: which column to filter and whether to.

    bypassed marks an explicit call-site opt-out (without_tenant_scope),
    as opposed to a scope that simply found no tenant.
    """

    context: TenantContext
    column: str = "tenant_id"
    applies: bool = False
    bypassed: bool = False

    @property
    def tenant_id(self) -> int | str | None:
        return self.context.tenant_id


@dataclass(frozen=True)
class DomainContext:
    """Configuration-aware classification of a request host."""

    host: str
    kind: DomainKind
    parsed: ParsedHost
    tenant_slug: str | None
    is_central: bool
