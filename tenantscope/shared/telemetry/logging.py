"""Logging setup. Every record carries the tenant id of the current context."""

import logging
import sys

from tenantscope.core.config import get_settings
from tenantscope.core.tenant_context import get_tenant_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [tenant=%(tenant_id)s] %(message)s"


class TenantLogFilter(logging.Filter):
    """Attach ``tenant_id`` to each record ("-" outside a tenant context)."""

    def filter(self, record: logging.LogRecord) -> bool:
        tenant_id = get_tenant_id()
        record.tenant_id = "-" if tenant_id is None else tenant_id
        return True


def setup_logging() -> None:
    """Configure root logging to stdout; DEBUG when settings.debug is True."""
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(TenantLogFilter())
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[handler],
    )
