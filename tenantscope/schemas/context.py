"""Domain/tenant context API schemas."""

from pydantic import BaseModel, Field

from tenantscope.domain.enums import DomainKind, TenantSource


class DomainContextResponse(BaseModel):
    """Response for GET /context: how the request host and tenant were resolved."""

    host: str = Field(..., description="Request host, port stripped")
    kind: DomainKind
    subdomain: str | None = None
    base_domain: str
    tenant_slug: str | None = None
    is_central: bool
    admin_domain: str
    tenant_id: int | str | None = Field(
        default=None, description="Current tenant id; None when scoping is skipped"
    )
    tenant_source: TenantSource
