"""Core: config, request-scoped tenancy state and application bootstrap."""

from tenantscope.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
