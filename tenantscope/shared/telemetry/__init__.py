"""Telemetry: logging setup."""

from tenantscope.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
