"""Request dependencies (composition root) for tenant resolution and domain context."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tenantscope.application.services.domain_context import DomainContextService
from tenantscope.application.services.tenant_scope import (
    TenantScopeResolver,
    create_tenant_scope_resolver,
)
from tenantscope.core.config import get_settings
from tenantscope.infrastructure.persistence.database import get_optional_db
from tenantscope.infrastructure.persistence.repositories import TenantDomainRepository


def get_tenant_resolver(request: Request) -> TenantScopeResolver:
    """Resolver built at startup (app.state), or a fresh one when lifespan did not run."""
    resolver = getattr(request.app.state, "tenant_resolver", None)
    if resolver is None:
        resolver = create_tenant_scope_resolver()
    return resolver


async def get_domain_context_service(
    db: Annotated[AsyncSession | None, Depends(get_optional_db)],
) -> DomainContextService:
    """Domain classifier; custom-domain lookups only when a database is configured."""
    registry = TenantDomainRepository(db) if db is not None else None
    return DomainContextService(get_settings().central_domain_set, registry)
