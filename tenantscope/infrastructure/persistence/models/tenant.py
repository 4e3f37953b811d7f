"""Central ORM models: Tenant and TenantDomain (landlord tables, never tenant-scoped)."""

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tenantscope.domain.enums import TenantStatus
from tenantscope.infrastructure.persistence.database import Base
from tenantscope.infrastructure.persistence.models.mixins import (
    CentralMixin,
    CuidMixin,
    TimestampMixin,
)


class Tenant(CentralMixin, CuidMixin, TimestampMixin, Base):
    """Root tenant entity. Table: tenant. slug is the subdomain label."""

    __tablename__ = "tenant"

    slug: Mapped[str] = mapped_column(String(63), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=TenantStatus.ACTIVE.value, index=True
    )

    domains: Mapped[list["TenantDomain"]] = relationship(
        back_populates="tenant", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ({})".format(
                ", ".join(
                    "'{}'".format(v.replace("'", "''"))
                    for v in TenantStatus.values()
                )
            ),
            name="tenant_status_check",
        ),
    )


class TenantDomain(CentralMixin, CuidMixin, TimestampMixin, Base):
    """Custom domain registered to a tenant (e.g. customerbusiness.com). Table: tenant_domain."""

    __tablename__ = "tenant_domain"

    tenant_id: Mapped[str] = mapped_column(
        String, ForeignKey("tenant.id", ondelete="CASCADE"), nullable=False, index=True
    )
    domain: Mapped[str] = mapped_column(String(253), unique=True, nullable=False, index=True)

    tenant: Mapped[Tenant] = relationship(back_populates="domains")
