"""Tests for TenantScopeResolver: resolution order, central detection, scope decisions."""

from typing import Any

from tenantscope.application.services.tenant_scope import (
    UNSCOPED,
    TenantScopeResolver,
    all_tenants,
    create_tenant_scope_resolver,
    without_tenant_scope,
)
from tenantscope.core.tenant_context import set_request_context, set_tenant_id
from tenantscope.domain.enums import TenantSource
from tenantscope.domain.value_objects import RequestContext, TenantContext
from tests.models import AuditEntry, LeaveRequest, Office, PublicHoliday


class FakePackage:
    def __init__(self, tenant: Any) -> None:
        self.tenant = tenant

    def initialized(self) -> bool:
        return self.tenant is not None

    def tenant_key(self) -> Any:
        return self.tenant


class BrokenPackage:
    def initialized(self) -> bool:
        raise RuntimeError("no tenancy context")

    def tenant_key(self) -> Any:
        return None


class TestResolveCurrentTenantId:
    def test_standalone_default(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings())
        assert resolver.resolve_current_tenant_id() == 1
        assert resolver.resolve_context().source is TenantSource.STANDALONE_DEFAULT

    def test_configured_standalone_id(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(standalone_tenant_id=5))
        assert resolver.resolve_current_tenant_id() == 5

    def test_standalone_id_from_env(self, monkeypatch) -> None:
        from tenantscope.core.config import get_settings

        monkeypatch.setenv("STANDALONE_TENANT_ID", "3")
        get_settings.cache_clear()
        assert TenantScopeResolver().resolve_current_tenant_id() == 3

    def test_package_tenant_wins(self, make_settings) -> None:
        settings = make_settings(tenancy_package_enabled=True, platform_enabled=True)
        resolver = TenantScopeResolver(settings, package=FakePackage("pkg-tenant"))
        request = RequestContext(session={"tenant_id": "session-tenant"})
        assert resolver.resolve_context(request) == TenantContext(
            "pkg-tenant", TenantSource.TENANCY_PACKAGE
        )

    def test_uninitialized_package_falls_through_to_platform(self, make_settings) -> None:
        settings = make_settings(tenancy_package_enabled=True, platform_enabled=True)
        resolver = TenantScopeResolver(settings, package=FakePackage(None))
        request = RequestContext(params={"tenant_id": "param-tenant"})
        assert resolver.resolve_current_tenant_id(request) == "param-tenant"

    def test_uninitialized_package_falls_through_to_standalone(self, make_settings) -> None:
        settings = make_settings(tenancy_package_enabled=True)
        resolver = TenantScopeResolver(settings, package=FakePackage(None))
        assert resolver.resolve_current_tenant_id() == 1

    def test_package_failure_is_no_tenant(self, make_settings) -> None:
        settings = make_settings(tenancy_package_enabled=True)
        resolver = TenantScopeResolver(settings, package=BrokenPackage())
        assert resolver.resolve_context() == TenantContext.empty()

    def test_platform_without_tenant_is_none(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(platform_enabled=True))
        assert resolver.resolve_current_tenant_id(RequestContext()) is None

    def test_uses_ambient_request_context(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(platform_enabled=True))
        set_request_context(RequestContext(session={"tenant_id": 11}))
        assert resolver.resolve_current_tenant_id() == 11

    def test_empty_provider_chain(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(), providers=[])
        assert resolver.resolve_context() == TenantContext.empty()

    def test_context_var_package_wiring(self, make_settings) -> None:
        resolver = create_tenant_scope_resolver(make_settings(tenancy_package_enabled=True))
        set_tenant_id("ctx-tenant")
        assert resolver.resolve_context().source is TenantSource.TENANCY_PACKAGE
        set_tenant_id(None)
        assert resolver.resolve_context().source is TenantSource.STANDALONE_DEFAULT


class TestShouldApplyScope:
    def test_scoped_entity_in_standalone_mode(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings())
        assert resolver.should_apply_scope(LeaveRequest)

    def test_opt_out_flag(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings())
        assert not resolver.should_apply_scope(PublicHoliday)

    def test_central_connection(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings())
        assert resolver.is_central_context(AuditEntry)
        assert not resolver.should_apply_scope(AuditEntry)

    def test_custom_central_connection_name(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(central_connection="landlord"))
        assert not resolver.is_central_context(AuditEntry)

    def test_central_domain_request(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(central_domains="aeos365.test"))
        request = RequestContext(host="aeos365.test:8000")
        assert resolver.is_central_context(LeaveRequest, request)
        assert not resolver.should_apply_scope(LeaveRequest, request)

    def test_tenant_domain_request_is_scoped(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(central_domains="aeos365.test"))
        request = RequestContext(host="acme.aeos365.test")
        assert not resolver.is_central_context(LeaveRequest, request)
        assert resolver.should_apply_scope(LeaveRequest, request)

    def test_no_request_is_not_central(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings())
        assert not resolver.is_central_context(LeaveRequest)

    def test_no_tenant_disables_scope(self, make_settings) -> None:
        resolver = TenantScopeResolver(make_settings(platform_enabled=True))
        assert not resolver.should_apply_scope(LeaveRequest, RequestContext(host="acme.x.test"))


class TestScopeFor:
    def test_applies_with_default_column(self, make_settings) -> None:
        scope = TenantScopeResolver(make_settings()).scope_for(LeaveRequest)
        assert scope.applies
        assert scope.column == "tenant_id"
        assert scope.tenant_id == 1
        assert not scope.bypassed

    def test_model_column_override(self, make_settings) -> None:
        scope = TenantScopeResolver(make_settings()).scope_for(Office)
        assert scope.column == "company_id"

    def test_settings_column(self, make_settings) -> None:
        scope = TenantScopeResolver(make_settings(tenant_key_column="org_id")).scope_for(
            LeaveRequest
        )
        assert scope.column == "org_id"

    def test_central_scope_keeps_context_but_does_not_apply(self, make_settings) -> None:
        scope = TenantScopeResolver(make_settings()).scope_for(AuditEntry)
        assert not scope.applies
        assert scope.context.tenant_id == 1


def test_bypass_markers() -> None:
    assert without_tenant_scope() is UNSCOPED
    assert all_tenants() is UNSCOPED
    assert UNSCOPED.bypassed and not UNSCOPED.applies
    assert TenantScopeResolver.without_tenant_scope() is UNSCOPED
