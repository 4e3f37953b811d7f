"""Tenant API schemas."""

from pydantic import BaseModel, ConfigDict

from tenantscope.domain.enums import TenantStatus


class TenantResponse(BaseModel):
    """Tenant record the request host resolves to."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    name: str
    status: TenantStatus
