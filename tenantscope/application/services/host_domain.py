"""Host domain parsing: split a request host into subdomain and base domain.

Domain pattern recognition, no configuration required:

- admin.domain.com → admin subdomain (central)
- domain.com → platform/root domain (central)
- {tenant}.domain.com → tenant subdomain

All functions are total: malformed input degrades to treating the whole
string as the base domain. Multi-label public suffixes are not special-cased,
so a bare "example.co.uk" parses as subdomain "example" on base "co.uk".
Hosts that need real public-suffix handling must register a custom domain
instead of relying on this heuristic.
"""

import ipaddress
import re

from tenantscope.core.tenant_context import get_request_context
from tenantscope.domain.value_objects import ParsedHost

ADMIN_SUBDOMAIN = "admin"
LOCALHOST = "localhost"

_PORT_RE = re.compile(r":\d+$")


def _is_ip_literal(value: str) -> bool:
    """Return True for IPv4/IPv6 literals, including bracketed IPv6 ("[::1]")."""
    candidate = value[1:-1] if value.startswith("[") and value.endswith("]") else value
    try:
        ipaddress.ip_address(candidate)
    except ValueError:
        return False
    return True


def strip_port(host: str) -> str:
    """Remove a trailing ":<port>". Bare IPv6 literals are returned unchanged."""
    if _is_ip_literal(host):
        return host
    return _PORT_RE.sub("", host)


def parse_host(host: str) -> ParsedHost:
    """Parse a host into subdomain and base domain parts.

    Examples:
        "admin.aeos365.test"      → ParsedHost("admin", "aeos365.test")
        "aeos365.test"            → ParsedHost(None, "aeos365.test")
        "tenant1.aeos365.test:80" → ParsedHost("tenant1", "aeos365.test")
        "localhost"               → ParsedHost(None, "localhost")
        "admin.localhost"         → ParsedHost(None, "admin.localhost")
        "127.0.0.1"               → ParsedHost(None, "127.0.0.1")
    """
    host = strip_port(host)
    if _is_ip_literal(host) or host == LOCALHOST:
        return ParsedHost(subdomain=None, base_domain=host)

    parts = host.split(".")
    if len(parts) < 3 or not parts[0]:
        return ParsedHost(subdomain=None, base_domain=host)
    return ParsedHost(subdomain=parts[0], base_domain=".".join(parts[1:]))


def is_host_on_central_domain(host: str) -> bool:
    """True when the host has no subdomain or is the admin subdomain."""
    subdomain = parse_host(host).subdomain
    return subdomain is None or subdomain == ADMIN_SUBDOMAIN


def is_host_admin_domain(host: str) -> bool:
    return parse_host(host).subdomain == ADMIN_SUBDOMAIN


def is_host_platform_domain(host: str) -> bool:
    """True when the host is a root domain (no subdomain)."""
    return parse_host(host).subdomain is None


def is_host_tenant_domain(host: str) -> bool:
    """True when the host carries a subdomain other than admin."""
    subdomain = parse_host(host).subdomain
    return subdomain is not None and subdomain != ADMIN_SUBDOMAIN


def get_platform_domain_from_host(host: str) -> str:
    """Strip any subdomain: "tenant1.aeos365.test" → "aeos365.test"."""
    return parse_host(host).base_domain


def get_admin_domain_from_host(host: str) -> str:
    """Admin domain for the host's platform: "aeos365.test" → "admin.aeos365.test"."""
    return f"{ADMIN_SUBDOMAIN}.{get_platform_domain_from_host(host)}"


def get_tenant_domain_from_host(host: str, tenant_slug: str) -> str:
    """Build a tenant domain: ("aeos365.test", "acme") → "acme.aeos365.test"."""
    return f"{tenant_slug}.{get_platform_domain_from_host(host)}"


def get_tenant_slug_from_host(host: str) -> str | None:
    """Return the tenant slug, or None for root and admin hosts."""
    subdomain = parse_host(host).subdomain
    if subdomain is None or subdomain == ADMIN_SUBDOMAIN:
        return None
    return subdomain


def get_current_host(request_host_header: str | None = None) -> str:
    """Return the current request host with the port stripped.

    Uses the given Host header value, else the ambient request context.
    Falls back to "localhost" when no request is available.
    """
    host = request_host_header
    if host is None:
        request = get_request_context()
        host = request.host if request is not None else None
    if not host:
        return LOCALHOST
    return strip_port(host)
