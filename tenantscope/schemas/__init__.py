"""Pydantic request/response schemas."""

from tenantscope.schemas.context import DomainContextResponse
from tenantscope.schemas.health import HealthResponse
from tenantscope.schemas.tenant import TenantResponse

__all__ = ["DomainContextResponse", "HealthResponse", "TenantResponse"]
