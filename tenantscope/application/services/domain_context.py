"""Configuration-aware domain classification for request routing.

Central domains are:
- explicitly configured central domains (settings.central_domains)
- the admin subdomain of any domain: admin.domain.com
- root domains (no subdomain) that are not registered to a tenant

Tenant domains are:
- any subdomain other than admin: tenant1.domain.com
- custom domains registered in the tenant_domain table: customerbusiness.com
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from tenantscope.application.services.host_domain import (
    ADMIN_SUBDOMAIN,
    parse_host,
    strip_port,
)
from tenantscope.domain.enums import DomainKind
from tenantscope.domain.value_objects import DomainContext

logger = logging.getLogger(__name__)


class TenantDomainLookup(Protocol):
    """Registry of custom domains owned by tenants."""

    async def is_registered(self, domain: str) -> bool: ...


class DomainContextService:
    """Classify hosts using configured central domains and the custom-domain registry."""

    def __init__(
        self,
        central_domains: Iterable[str],
        domain_registry: TenantDomainLookup | None = None,
    ) -> None:
        self.central_domains = frozenset(central_domains)
        self.domain_registry = domain_registry

    async def is_registered_tenant_domain(self, host: str) -> bool:
        """True if host is a custom domain registered to a tenant.

        Without a registry, or when the lookup fails (database unavailable
        during install or tests), the host is treated as unregistered.
        """
        if self.domain_registry is None:
            return False
        try:
            return await self.domain_registry.is_registered(host)
        except Exception:
            logger.warning("Tenant domain lookup failed for %s", host, exc_info=True)
            return False

    async def is_central(self, host: str) -> bool:
        host = strip_port(host)
        parsed = parse_host(host)
        if parsed.subdomain == ADMIN_SUBDOMAIN:
            return True
        if host in self.central_domains:
            return True
        if parsed.subdomain is None:
            # Custom tenant domains have no subdomain but are not central.
            return not await self.is_registered_tenant_domain(host)
        return False

    async def classify(self, host: str) -> DomainContext:
        """Return the DomainContext for a request host."""
        host = strip_port(host)
        parsed = parse_host(host)
        central = await self.is_central(host)
        if parsed.subdomain == ADMIN_SUBDOMAIN:
            kind = DomainKind.ADMIN
        elif central:
            kind = DomainKind.PLATFORM
        else:
            kind = DomainKind.TENANT
        slug = parsed.subdomain if kind is DomainKind.TENANT else None
        return DomainContext(
            host=host,
            kind=kind,
            parsed=parsed,
            tenant_slug=slug,
            is_central=central,
        )
