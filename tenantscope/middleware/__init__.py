"""HTTP middleware: tenant context.

Applied in main app. Import and use from tenantscope.main.
"""

from tenantscope.middleware.tenant_context import TenantContextMiddleware

__all__ = ["TenantContextMiddleware"]
