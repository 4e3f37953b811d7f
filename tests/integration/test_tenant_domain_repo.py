"""TenantDomainRepository and DomainContextService against in-memory SQLite."""

import pytest

from tenantscope.application.services.domain_context import DomainContextService
from tenantscope.domain.enums import DomainKind
from tenantscope.domain.exceptions import TenantNotFoundException
from tenantscope.infrastructure.persistence.models import Tenant
from tenantscope.infrastructure.persistence.repositories import TenantDomainRepository


async def _tenant_with_domain(session, slug: str, domain: str) -> Tenant:
    tenant = Tenant(slug=slug, name=slug.title())
    session.add(tenant)
    await session.flush()
    await TenantDomainRepository(session).register(tenant.id, domain)
    return tenant


async def test_is_registered(sqlite_session) -> None:
    await _tenant_with_domain(sqlite_session, "acme", "customerbusiness.com")
    repo = TenantDomainRepository(sqlite_session)
    assert await repo.is_registered("customerbusiness.com")
    assert not await repo.is_registered("aeos365.test")


async def test_get_tenant_for_domain(sqlite_session) -> None:
    tenant = await _tenant_with_domain(sqlite_session, "acme", "customerbusiness.com")
    found = await TenantDomainRepository(sqlite_session).get_tenant_for_domain(
        "customerbusiness.com"
    )
    assert found is not None
    assert found.id == tenant.id
    assert await TenantDomainRepository(sqlite_session).get_tenant_for_domain("nope.com") is None


async def test_custom_domain_classifies_as_tenant(sqlite_session) -> None:
    await _tenant_with_domain(sqlite_session, "acme", "customerbusiness.com")
    service = DomainContextService(
        ["aeos365.test"], TenantDomainRepository(sqlite_session)
    )
    custom = await service.classify("customerbusiness.com:443")
    assert custom.kind is DomainKind.TENANT
    assert not custom.is_central
    assert custom.tenant_slug is None

    platform = await service.classify("aeos365.test")
    assert platform.kind is DomainKind.PLATFORM
    assert platform.is_central


async def test_register_for_unknown_tenant_raises(sqlite_session) -> None:
    with pytest.raises(TenantNotFoundException):
        await TenantDomainRepository(sqlite_session).register("missing", "x.example.com")
