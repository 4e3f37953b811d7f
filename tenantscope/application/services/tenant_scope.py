"""Tenant scope resolution: current tenant id and whether row scoping applies.

Resolution walks the provider chain chosen at startup (see
tenancy_providers). It never raises: when no tenant id resolves, scoping
is skipped for that call and the caller sees unfiltered rows. Central
detection relies on central_domains / central_connection being configured.

Usage:
    resolver = create_tenant_scope_resolver()
    scope = resolver.scope_for(Employee)
    repo = TenantScopedRepository(db, Employee, scope)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tenantscope.application.services.host_domain import strip_port
from tenantscope.application.services.tenancy_providers import (
    TenancyPackage,
    TenancyProvider,
    build_tenancy_providers,
)
from tenantscope.core.config import Settings, get_settings
from tenantscope.core.tenant_context import ContextVarTenancy, get_request_context
from tenantscope.domain.value_objects import RequestContext, TenantContext, TenantScope

logger = logging.getLogger(__name__)

# Explicit bypass marker consumed by the query layer.
UNSCOPED = TenantScope(context=TenantContext.empty(), applies=False, bypassed=True)


def without_tenant_scope() -> TenantScope:
    """Return the bypass marker: queries built with it carry no tenant predicate."""
    return UNSCOPED


all_tenants = without_tenant_scope


def is_tenantable(entity_type: type) -> bool:
    """False only when the entity type declares __tenantable__ = False."""
    return getattr(entity_type, "__tenantable__", True) is not False


def tenant_key_for(entity_type: type, default: str = "tenant_id") -> str:
    """Tenant column name for an entity type (__tenant_key__ overrides the default)."""
    return getattr(entity_type, "__tenant_key__", None) or default


class TenantScopeResolver:
    """Resolve the current tenant and decide row scoping per entity type.

    Every method takes an optional RequestContext; when omitted, the
    ambient request recorded by TenantContextMiddleware is used.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        providers: Sequence[TenancyProvider] | None = None,
        package: TenancyPackage | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        if providers is None:
            providers = build_tenancy_providers(self.settings, package)
        self.providers = tuple(providers)

    def _request(self, request: RequestContext | None) -> RequestContext | None:
        return request if request is not None else get_request_context()

    def resolve_context(self, request: RequestContext | None = None) -> TenantContext:
        """Return the current TenantContext; first provider with an answer wins."""
        request = self._request(request)
        for provider in self.providers:
            context = provider.resolve(request)
            if context is not None:
                return context
        return TenantContext.empty()

    def resolve_current_tenant_id(
        self, request: RequestContext | None = None
    ) -> int | str | None:
        return self.resolve_context(request).tenant_id

    def is_central_context(
        self, entity_type: type, request: RequestContext | None = None
    ) -> bool:
        """True for central-connection models or requests on a configured central domain."""
        if getattr(entity_type, "__connection__", None) == self.settings.central_connection:
            return True
        request = self._request(request)
        if request is None or not request.host:
            return False
        return strip_port(request.host) in self.settings.central_domain_set

    def should_apply_scope(
        self, entity_type: type, request: RequestContext | None = None
    ) -> bool:
        if not is_tenantable(entity_type):
            return False
        request = self._request(request)
        if self.is_central_context(entity_type, request):
            return False
        return self.resolve_current_tenant_id(request) is not None

    def scope_for(
        self, entity_type: type, request: RequestContext | None = None
    ) -> TenantScope:
        """Build the TenantScope a repository needs for entity_type."""
        request = self._request(request)
        column = tenant_key_for(entity_type, self.settings.tenant_key_column)
        context = self.resolve_context(request)
        applies = (
            is_tenantable(entity_type)
            and not self.is_central_context(entity_type, request)
            and context.has_tenant
        )
        if not applies:
            logger.debug(
                "Tenant scope not applied to %s (source=%s)",
                entity_type.__name__,
                context.source.value,
            )
        return TenantScope(context=context, column=column, applies=applies)

    without_tenant_scope = staticmethod(without_tenant_scope)
    all_tenants = staticmethod(all_tenants)


def create_tenant_scope_resolver(settings: Settings | None = None) -> TenantScopeResolver:
    """Resolver wired to the context-variable tenancy package set by middleware."""
    return TenantScopeResolver(settings=settings, package=ContextVarTenancy())
