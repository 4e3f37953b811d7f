"""Tenant context middleware.

Records the request snapshot (host, session, query params) used by
tenant resolution, and initializes the tenancy-package tenant from the
X-Tenant-ID header or the tenant claim of a bearer JWT. Both are cleared
after the response so state never leaks into the next request.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from tenantscope.application.services.host_domain import get_current_host
from tenantscope.core.config import get_settings
from tenantscope.core.tenant_context import set_request_context, set_tenant_id
from tenantscope.domain.value_objects import RequestContext
from tenantscope.infrastructure.security.jwt import tenant_id_from_token

logger = logging.getLogger(__name__)


def _tenant_id_from_request(request: Request) -> Any:
    """Return tenant_id from the tenant header or the JWT tenant claim."""
    settings = get_settings()
    tenant_id = request.headers.get(settings.tenant_header_name)
    if tenant_id:
        return tenant_id
    auth = request.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        try:
            return tenant_id_from_token(auth[7:].strip())
        except ValueError as exc:
            logger.debug("Ignoring bearer token for tenant context: %s", exc)
    return None


def _request_context(request: Request) -> RequestContext:
    # request.session asserts when no SessionMiddleware is installed.
    session = request.scope.get("session") or {}
    return RequestContext(
        host=get_current_host(request.headers.get("host") or ""),
        session=dict(session),
        params=dict(request.query_params),
    )


def TenantContextMiddleware(app: Callable) -> Callable:
    """Set request and tenant context before the route runs."""

    class _Middleware(BaseHTTPMiddleware):
        async def dispatch(self, request: Request, call_next: Callable) -> Response:
            set_request_context(_request_context(request))
            set_tenant_id(_tenant_id_from_request(request))
            try:
                return await call_next(request)
            finally:
                set_tenant_id(None)
                set_request_context(None)

    return _Middleware(app)
