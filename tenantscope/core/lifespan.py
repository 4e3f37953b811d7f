"""Application lifespan: startup and shutdown.

Startup configures logging and selects the tenancy provider chain once
(app.state.tenant_resolver). Shutdown disposes the SQL engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tenantscope.application.services.tenant_scope import create_tenant_scope_resolver
from tenantscope.core.config import get_settings
from tenantscope.infrastructure.persistence.database import dispose_engine
from tenantscope.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown."""
    setup_logging()
    settings = get_settings()
    resolver = create_tenant_scope_resolver(settings)
    app.state.tenant_resolver = resolver
    logger.info(
        "Tenancy providers: %s (platform_enabled=%s, central_domains=%s)",
        ", ".join(type(p).__name__ for p in resolver.providers),
        settings.platform_enabled,
        sorted(settings.central_domain_set),
    )
    try:
        yield
    finally:
        await dispose_engine()
