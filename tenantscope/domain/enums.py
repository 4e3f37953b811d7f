"""Domain enumerations for tenantscope.

Enums represent fixed sets of domain values (tenant status, where a
tenant id came from, how a host is classified).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class TenantStatus(_ValuesMixin, str, Enum):
    """Tenant lifecycle status."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"


class TenantSource(_ValuesMixin, str, Enum):
    """Where the current tenant id was resolved from."""

    TENANCY_PACKAGE = "tenancy_package"
    PLATFORM_SESSION = "platform_session"
    STANDALONE_DEFAULT = "standalone_default"
    NONE = "none"


class DomainKind(_ValuesMixin, str, Enum):
    """Classification of a request host."""

    PLATFORM = "platform"
    ADMIN = "admin"
    TENANT = "tenant"
