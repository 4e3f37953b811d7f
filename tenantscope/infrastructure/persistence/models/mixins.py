"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, TenantMixin, TimestampMixin, CentralMixin and the
combined TenantScopedModel.

Class attributes read by the tenant scope layer:
    __tenantable__: set False to opt a model out of tenant scoping.
    __tenant_key__: tenant column name when it is not settings.tenant_key_column.
    __connection__: connection name; the central connection is never scoped.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from tenantscope.shared.utils.generators import generate_cuid


class CuidMixin:
    """String primary key filled with a fresh cuid2 on insert."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(32), primary_key=True, default=generate_cuid)


class TenantMixin:
    """Mixin for tenant-scoped models. Provides an indexed tenant_id column.

    The column is a string so both integer (standalone) and CUID tenant ids
    fit; the scope layer converts ids to str for string columns.
    """

    __tenantable__ = True

    @declared_attr
    def tenant_id(cls) -> Mapped[str]:
        return mapped_column(String(64), nullable=False, index=True)


class TimestampMixin:
    """created_at and updated_at, set by the database (timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CentralMixin:
    """Mixin for landlord tables: bound to the central connection, never scoped."""

    __connection__ = "central"
    __tenantable__ = False


class TenantScopedModel(CuidMixin, TenantMixin, TimestampMixin):
    """Combined mixin: CUID + tenant_id + created_at/updated_at."""

    __abstract__ = True
