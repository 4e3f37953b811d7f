"""Unit tests for DomainContextService (configured central domains, custom-domain registry)."""

from tenantscope.application.services.domain_context import DomainContextService
from tenantscope.domain.enums import DomainKind


class StaticRegistry:
    def __init__(self, *domains: str) -> None:
        self.domains = set(domains)

    async def is_registered(self, domain: str) -> bool:
        return domain in self.domains


class FailingRegistry:
    async def is_registered(self, domain: str) -> bool:
        raise ConnectionError("database unavailable")


async def test_admin_subdomain_is_central() -> None:
    context = await DomainContextService([]).classify("admin.aeos365.test")
    assert context.kind is DomainKind.ADMIN
    assert context.is_central
    assert context.tenant_slug is None


async def test_root_domain_is_platform() -> None:
    context = await DomainContextService(["aeos365.test"]).classify("aeos365.test:8000")
    assert context.host == "aeos365.test"
    assert context.kind is DomainKind.PLATFORM
    assert context.is_central


async def test_tenant_subdomain() -> None:
    context = await DomainContextService(["aeos365.test"]).classify("acme.aeos365.test")
    assert context.kind is DomainKind.TENANT
    assert not context.is_central
    assert context.tenant_slug == "acme"
    assert context.parsed.base_domain == "aeos365.test"


async def test_configured_central_subdomain_host() -> None:
    service = DomainContextService(["app.aeos365.test"])
    context = await service.classify("app.aeos365.test")
    assert context.kind is DomainKind.PLATFORM
    assert context.tenant_slug is None


async def test_registered_custom_domain_is_tenant() -> None:
    service = DomainContextService(["aeos365.test"], StaticRegistry("customerbusiness.com"))
    assert not await service.is_central("customerbusiness.com")
    assert await service.is_central("otherbusiness.com")


async def test_registry_failure_treats_domain_as_unregistered() -> None:
    service = DomainContextService([], FailingRegistry())
    assert await service.is_central("customerbusiness.com")
