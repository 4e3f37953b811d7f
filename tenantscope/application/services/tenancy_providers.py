"""Tenancy providers: where a tenant id can come from.

The provider chain is chosen once from configuration
(build_tenancy_providers) and walked in order by TenantScopeResolver.
A provider returns None when it does not apply, letting the next one try;
any TenantContext it returns (even an empty one) ends the walk.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from tenantscope.core.config import Settings
from tenantscope.domain.enums import TenantSource
from tenantscope.domain.value_objects import RequestContext, TenantContext

logger = logging.getLogger(__name__)


@runtime_checkable
class TenancyPackage(Protocol):
    """External tenancy package: knows whether a tenant is initialized."""

    def initialized(self) -> bool: ...

    def tenant_key(self) -> Any: ...


class TenancyProvider(Protocol):
    """One step of tenant-id resolution."""

    def resolve(self, request: RequestContext | None) -> TenantContext | None: ...


def _present(value: Any) -> bool:
    return value is not None and value != ""


class TenancyPackageProvider:
    """Tenant initialized by the tenancy package.

    Failures inside the package (e.g. called outside a request or queue
    context) resolve to no tenant and stop the walk.
    """

    def __init__(self, package: TenancyPackage) -> None:
        self.package = package

    def resolve(self, request: RequestContext | None) -> TenantContext | None:
        try:
            if not self.package.initialized():
                return None
            tenant_id = self.package.tenant_key()
        except Exception as exc:
            logger.debug("Tenancy package failed to report a tenant: %s", exc)
            return TenantContext.empty()
        if not _present(tenant_id):
            return None
        return TenantContext(tenant_id=tenant_id, source=TenantSource.TENANCY_PACKAGE)


class PlatformSessionProvider:
    """Platform mode: tenant id from the session, else from request params."""

    def __init__(self, session_key: str = "tenant_id", param_name: str = "tenant_id") -> None:
        self.session_key = session_key
        self.param_name = param_name

    def resolve(self, request: RequestContext | None) -> TenantContext | None:
        if request is None:
            return TenantContext.empty()
        value = request.session.get(self.session_key)
        if not _present(value):
            value = request.params.get(self.param_name)
        if not _present(value):
            return TenantContext.empty()
        return TenantContext(tenant_id=value, source=TenantSource.PLATFORM_SESSION)


class StandaloneProvider:
    """Standalone mode: a single fixed tenant id."""

    def __init__(self, tenant_id: int | str = 1) -> None:
        self.tenant_id = tenant_id

    def resolve(self, request: RequestContext | None) -> TenantContext | None:
        return TenantContext(tenant_id=self.tenant_id, source=TenantSource.STANDALONE_DEFAULT)


def build_tenancy_providers(
    settings: Settings,
    package: TenancyPackage | None = None,
) -> tuple[TenancyProvider, ...]:
    """Select the provider chain for this process.

    Order: tenancy package (when enabled and supplied), then platform
    session when the platform is enabled, otherwise the standalone default.
    """
    providers: list[TenancyProvider] = []
    if settings.tenancy_package_enabled and package is not None:
        providers.append(TenancyPackageProvider(package))
    if settings.platform_enabled:
        providers.append(
            PlatformSessionProvider(
                session_key=settings.tenant_session_key,
                param_name=settings.tenant_request_param,
            )
        )
    else:
        providers.append(StandaloneProvider(settings.standalone_tenant_id))
    return tuple(providers)
