"""Application services: host parsing, tenancy providers, scope resolution, domain context."""

from tenantscope.application.services.domain_context import (
    DomainContextService,
    TenantDomainLookup,
)
from tenantscope.application.services.host_domain import (
    get_admin_domain_from_host,
    get_current_host,
    get_platform_domain_from_host,
    get_tenant_domain_from_host,
    get_tenant_slug_from_host,
    is_host_admin_domain,
    is_host_on_central_domain,
    is_host_platform_domain,
    is_host_tenant_domain,
    parse_host,
)
from tenantscope.application.services.tenancy_providers import (
    PlatformSessionProvider,
    StandaloneProvider,
    TenancyPackage,
    TenancyPackageProvider,
    TenancyProvider,
    build_tenancy_providers,
)
from tenantscope.application.services.tenant_scope import (
    UNSCOPED,
    TenantScopeResolver,
    all_tenants,
    create_tenant_scope_resolver,
    without_tenant_scope,
)

__all__ = [
    "DomainContextService",
    "TenantDomainLookup",
    "parse_host",
    "is_host_on_central_domain",
    "is_host_admin_domain",
    "is_host_platform_domain",
    "is_host_tenant_domain",
    "get_platform_domain_from_host",
    "get_admin_domain_from_host",
    "get_tenant_domain_from_host",
    "get_tenant_slug_from_host",
    "get_current_host",
    "TenancyPackage",
    "TenancyProvider",
    "TenancyPackageProvider",
    "PlatformSessionProvider",
    "StandaloneProvider",
    "build_tenancy_providers",
    "TenantScopeResolver",
    "create_tenant_scope_resolver",
    "without_tenant_scope",
    "all_tenants",
    "UNSCOPED",
]
