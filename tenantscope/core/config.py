"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Tenancy options (central domains, standalone tenant id,
platform flag) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Every setting has a default so the library works in standalone mode
    with no environment at all.
    """

    # App
    app_name: str = "tenantscope"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (async SQLAlchemy). Empty URL = no SQL backend.
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Tenancy
    # Comma-separated hosts that are always central (landlord) context.
    central_domains: str = "localhost,127.0.0.1"
    # Models whose __connection__ equals this name are never tenant-scoped.
    central_connection: str = "central"
    standalone_tenant_id: int | str = 1
    platform_enabled: bool = False
    tenancy_package_enabled: bool = False
    tenant_key_column: str = "tenant_id"
    tenant_header_name: str = "X-Tenant-ID"
    tenant_session_key: str = "tenant_id"
    tenant_request_param: str = "tenant_id"

    # Security (bearer tokens carrying a tenant claim)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    jwt_tenant_claim: str = "tenant_id"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("standalone_tenant_id", mode="before")
    @classmethod
    def coerce_numeric_tenant_id(cls, value: object) -> object:
        """Environment values arrive as strings; "1" means the integer id 1."""
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return value

    @model_validator(mode="after")
    def validate_tenancy(self) -> "Settings":
        """Validate tenancy options.

        - tenant_key_column must be a plain SQL identifier.
        - central_connection must be non-empty.
        - standalone_tenant_id must not be an empty string.
        """
        if not self.tenant_key_column.isidentifier():
            raise ValueError(
                f"tenant_key_column must be a valid identifier, got: {self.tenant_key_column!r}"
            )
        if not self.central_connection.strip():
            raise ValueError("central_connection must not be empty.")
        if isinstance(self.standalone_tenant_id, str) and not self.standalone_tenant_id.strip():
            raise ValueError(
                "STANDALONE_TENANT_ID must not be empty. Unset it to use the default (1)."
            )
        return self

    @property
    def central_domain_set(self) -> frozenset[str]:
        """Configured central domains as a set (blank entries dropped)."""
        return frozenset(d.strip() for d in self.central_domains.split(",") if d.strip())


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
