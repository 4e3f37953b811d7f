"""Tenant domain repository: custom domains registered to tenants (central table)."""

from __future__ import annotations

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from tenantscope.domain.exceptions import TenantNotFoundException
from tenantscope.infrastructure.persistence.models.tenant import Tenant, TenantDomain
from tenantscope.infrastructure.persistence.repositories.base import BaseRepository


class TenantDomainRepository(BaseRepository[TenantDomain]):
    """Lookups over tenant_domain. Satisfies TenantDomainLookup."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TenantDomain)

    async def is_registered(self, domain: str) -> bool:
        """True if the domain is registered to any tenant."""
        result = await self.db.execute(
            select(exists().where(TenantDomain.domain == domain))
        )
        return bool(result.scalar())

    async def get_tenant_for_domain(self, domain: str) -> Tenant | None:
        result = await self.db.execute(
            select(Tenant)
            .join(TenantDomain, TenantDomain.tenant_id == Tenant.id)
            .where(TenantDomain.domain == domain)
        )
        return result.scalar_one_or_none()

    async def get_tenant_by_slug(self, slug: str) -> Tenant | None:
        result = await self.db.execute(select(Tenant).where(Tenant.slug == slug))
        return result.scalar_one_or_none()

    async def register(self, tenant_id: str, domain: str) -> TenantDomain:
        """Attach a custom domain to an existing tenant.

        Raises:
            TenantNotFoundException: If no tenant has this id.
        """
        if await self.db.get(Tenant, tenant_id) is None:
            raise TenantNotFoundException(tenant_id)
        return await self.create(TenantDomain(tenant_id=tenant_id, domain=domain))
