"""tenantscope: host-to-tenant mapping and tenant row scoping.

Public API:
    parse_host and the is_host_* / get_*_from_host helpers
    TenantScopeResolver (resolve_current_tenant_id, should_apply_scope, scope_for)
    without_tenant_scope / all_tenants bypass markers
"""

from tenantscope.application.services import (
    UNSCOPED,
    TenantScopeResolver,
    all_tenants,
    create_tenant_scope_resolver,
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
    without_tenant_scope,
)
from tenantscope.domain.value_objects import ParsedHost, RequestContext, TenantContext

__all__ = [
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
    "TenantScopeResolver",
    "create_tenant_scope_resolver",
    "without_tenant_scope",
    "all_tenants",
    "UNSCOPED",
    "ParsedHost",
    "RequestContext",
    "TenantContext",
]
