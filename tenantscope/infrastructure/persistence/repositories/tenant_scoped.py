"""Tenant-scoped repositories.

TenantScopedRepository requires a TenantScope (see
TenantScopeResolver.scope_for) and adds `<tenant column> = <tenant id>` to
every select, update and delete it builds when the scope applies. The only
way to drop the predicate is an explicit call:

    repo.without_tenant_scope().get_all()   # or repo.all_tenants()

which returns an UnscopedRepository over the same session and model.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from tenantscope.application.services.tenant_scope import UNSCOPED
from tenantscope.domain.exceptions import ResourceNotFoundException
from tenantscope.domain.value_objects import TenantScope
from tenantscope.infrastructure.persistence.repositories.base import BaseRepository, ModelType


def _coerce_tenant_id(column: Any, tenant_id: int | str) -> int | str:
    """Match the tenant id to the column's Python type.

    Int ids become str on string columns; digit strings (session and query
    values) become int on integer columns.
    """
    try:
        python_type = column.expression.type.python_type
    except NotImplementedError:
        return tenant_id
    if python_type is str and not isinstance(tenant_id, str):
        return str(tenant_id)
    if python_type is int and isinstance(tenant_id, str) and tenant_id.strip().isdigit():
        return int(tenant_id)
    return tenant_id


def apply_tenant_scope(stmt: Any, model: type, scope: TenantScope) -> Any:
    """Add the tenant equality predicate to a select/update/delete when the scope applies.

    Applying the same scope twice only repeats an identical predicate.
    """
    if scope.bypassed or not scope.applies or scope.tenant_id is None:
        return stmt
    column = getattr(model, scope.column)
    return stmt.where(column == _coerce_tenant_id(column, scope.tenant_id))


class TenantScopedRepository(BaseRepository[ModelType]):
    """Repository whose statements are filtered by the current tenant.

    create() fills the tenant column when it is empty; update() and
    delete() treat rows of other tenants as not found.
    """

    def __init__(
        self, db: AsyncSession, model: type[ModelType], scope: TenantScope
    ) -> None:
        super().__init__(db, model)
        self.scope = scope

    def _apply_scope(self, stmt: Any) -> Any:
        return apply_tenant_scope(stmt, self.model, self.scope)

    def _tenant_value(self) -> int | str | None:
        if not self.scope.applies or self.scope.tenant_id is None:
            return None
        return _coerce_tenant_id(getattr(self.model, self.scope.column), self.scope.tenant_id)

    def _check_owned(self, obj: ModelType) -> None:
        expected = self._tenant_value()
        if expected is None:
            return
        actual = getattr(obj, self.scope.column)
        if actual is not None and actual != expected:
            raise ResourceNotFoundException(self.model.__name__, str(getattr(obj, "id", "")))

    async def create(self, obj: ModelType) -> ModelType:
        expected = self._tenant_value()
        if expected is not None and getattr(obj, self.scope.column, None) in (None, ""):
            setattr(obj, self.scope.column, expected)
        return await super().create(obj)

    async def update(self, obj: ModelType) -> ModelType:
        self._check_owned(obj)
        return await super().update(obj)

    async def delete(self, obj: ModelType) -> None:
        self._check_owned(obj)
        await super().delete(obj)

    def without_tenant_scope(self) -> UnscopedRepository[ModelType]:
        """Return a repository over the same session and model with no tenant predicate."""
        return UnscopedRepository(self.db, self.model)

    all_tenants = without_tenant_scope


class UnscopedRepository(BaseRepository[ModelType]):
    """Explicit cross-tenant access. Statements never carry a tenant predicate."""

    scope = UNSCOPED
