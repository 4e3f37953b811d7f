"""Health check endpoint for liveness checks. Never touches the database."""

from fastapi import APIRouter

from tenantscope.core.config import get_settings
from tenantscope.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    settings = get_settings()
    if settings.tenancy_package_enabled:
        mode = "tenancy_package"
    elif settings.platform_enabled:
        mode = "platform"
    else:
        mode = "standalone"
    return HealthResponse(tenancy_mode=mode, database_configured=bool(settings.database_url))
