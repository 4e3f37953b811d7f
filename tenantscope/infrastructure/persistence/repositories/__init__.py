"""Repositories: base CRUD, tenant-scoped access and central lookups."""

from tenantscope.infrastructure.persistence.repositories.base import BaseRepository
from tenantscope.infrastructure.persistence.repositories.tenant_domain_repo import (
    TenantDomainRepository,
)
from tenantscope.infrastructure.persistence.repositories.tenant_scoped import (
    TenantScopedRepository,
    UnscopedRepository,
    apply_tenant_scope,
)

__all__ = [
    "BaseRepository",
    "TenantDomainRepository",
    "TenantScopedRepository",
    "UnscopedRepository",
    "apply_tenant_scope",
]
