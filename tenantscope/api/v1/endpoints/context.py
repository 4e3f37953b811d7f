"""Domain context endpoints: classification of the request host and the resolved tenant."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tenantscope.api.v1.dependencies import get_domain_context_service, get_tenant_resolver
from tenantscope.application.services.domain_context import DomainContextService
from tenantscope.application.services.host_domain import (
    get_admin_domain_from_host,
    get_current_host,
)
from tenantscope.application.services.tenant_scope import TenantScopeResolver
from tenantscope.core.config import get_settings
from tenantscope.domain.enums import DomainKind
from tenantscope.domain.exceptions import TenantNotFoundException
from tenantscope.infrastructure.persistence.database import get_db
from tenantscope.infrastructure.persistence.repositories import TenantDomainRepository
from tenantscope.schemas.context import DomainContextResponse
from tenantscope.schemas.tenant import TenantResponse

router = APIRouter()


@router.get("", response_model=DomainContextResponse)
async def get_domain_context(
    domains: Annotated[DomainContextService, Depends(get_domain_context_service)],
    resolver: Annotated[TenantScopeResolver, Depends(get_tenant_resolver)],
) -> DomainContextResponse:
    """Return how this request's host was classified and which tenant it resolves to."""
    domain = await domains.classify(get_current_host())
    tenant = resolver.resolve_context()
    return DomainContextResponse(
        host=domain.host,
        kind=domain.kind,
        subdomain=domain.parsed.subdomain,
        base_domain=domain.parsed.base_domain,
        tenant_slug=domain.tenant_slug,
        is_central=domain.is_central,
        admin_domain=get_admin_domain_from_host(domain.host),
        tenant_id=tenant.tenant_id,
        tenant_source=tenant.source,
    )


@router.get("/tenant", response_model=TenantResponse)
async def get_host_tenant(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TenantResponse:
    """Return the tenant owning the request host (subdomain slug or registered custom domain).

    Central hosts and unknown slugs or domains are 404; no database is 503.
    """
    repo = TenantDomainRepository(db)
    domain = await DomainContextService(get_settings().central_domain_set, repo).classify(
        get_current_host()
    )
    tenant = None
    if domain.kind is DomainKind.TENANT:
        if domain.tenant_slug is not None:
            tenant = await repo.get_tenant_by_slug(domain.tenant_slug)
        else:
            tenant = await repo.get_tenant_for_domain(domain.host)
    if tenant is None:
        raise TenantNotFoundException(domain.host)
    return TenantResponse.model_validate(tenant)
