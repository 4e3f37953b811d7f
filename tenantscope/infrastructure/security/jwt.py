"""Bearer tokens carrying a tenant claim.

Signing key, algorithm and claim name come from Settings. Verification
errors surface as ValueError so callers (middleware) decide whether an
unreadable token is fatal.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from tenantscope.core.config import Settings, get_settings

DEFAULT_TOKEN_TTL = timedelta(minutes=60)


def _signing_key(settings: Settings) -> str:
    key = settings.secret_key.get_secret_value()
    if not key:
        raise ValueError("SECRET_KEY is not configured; bearer tokens cannot be used")
    return key


def create_access_token(claims: dict[str, Any], ttl: timedelta | None = None) -> str:
    """Sign ``claims`` (for example ``sub`` and ``tenant_id``) with an ``exp`` claim added."""
    settings = get_settings()
    payload = {**claims, "exp": datetime.now(UTC) + (ttl or DEFAULT_TOKEN_TTL)}
    return jwt.encode(payload, _signing_key(settings), algorithm=settings.algorithm)


def verify_token(token: str) -> dict[str, Any]:
    """Decode a signed token; tokens without ``exp`` are rejected.

    Raises:
        ValueError: No signing key configured, or the token is malformed,
            badly signed or expired.
    """
    settings = get_settings()
    key = _signing_key(settings)
    try:
        return jwt.decode(
            token, key, algorithms=[settings.algorithm], options={"require_exp": True}
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e


def tenant_id_from_token(token: str) -> Any:
    """Tenant claim (``settings.jwt_tenant_claim``) of a verified token, or None."""
    return verify_token(token).get(get_settings().jwt_tenant_claim)
