"""Tests for bearer token helpers (tenant claim)."""

from datetime import timedelta

import pytest

from tenantscope.infrastructure.security.jwt import (
    create_access_token,
    tenant_id_from_token,
    verify_token,
)


@pytest.fixture
def secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECRET_KEY", "unit-test-secret")
    from tenantscope.core.config import get_settings

    get_settings.cache_clear()


def test_tenant_claim_round_trip(secret) -> None:
    token = create_access_token({"sub": "user-1", "tenant_id": "t-9"})
    assert verify_token(token)["sub"] == "user-1"
    assert tenant_id_from_token(token) == "t-9"


def test_missing_tenant_claim_is_none(secret) -> None:
    assert tenant_id_from_token(create_access_token({"sub": "user-1"})) is None


def test_expired_token_is_rejected(secret) -> None:
    token = create_access_token({"tenant_id": "t-9"}, timedelta(seconds=-5))
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_garbage_token_is_rejected(secret) -> None:
    with pytest.raises(ValueError):
        tenant_id_from_token("not.a.jwt")


def test_no_secret_configured() -> None:
    with pytest.raises(ValueError, match="SECRET_KEY"):
        verify_token("anything")
