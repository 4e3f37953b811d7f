"""ORM models and mixins."""

from tenantscope.infrastructure.persistence.models.mixins import (
    CentralMixin,
    CuidMixin,
    TenantMixin,
    TenantScopedModel,
    TimestampMixin,
)
from tenantscope.infrastructure.persistence.models.tenant import Tenant, TenantDomain

__all__ = [
    "CentralMixin",
    "CuidMixin",
    "TenantMixin",
    "TenantScopedModel",
    "TimestampMixin",
    "Tenant",
    "TenantDomain",
]
