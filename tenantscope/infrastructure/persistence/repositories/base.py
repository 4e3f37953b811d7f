"""Base repository: generic CRUD, bulk update/delete and lifecycle hooks."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, and_, delete as sa_delete, func, inspect as sa_inspect, select
from sqlalchemy import update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import object_session

from tenantscope.domain.exceptions import ResourceNotFoundException
from tenantscope.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with query, get_by_id, get_all, count, create, update, delete.

    Every statement passes through _apply_scope; the base implementation
    leaves it untouched. Subclasses override _on_after_create,
    _on_after_update, _on_before_delete for side effects.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _apply_scope(self, stmt: Any) -> Any:
        """Hook for row filtering on select/update/delete statements."""
        return stmt

    def query(self) -> Select[tuple[ModelType]]:
        """Return a SELECT for the model with the repository's filters applied."""
        return self._apply_scope(select(self.model))

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(self.query().where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ModelType]:
        """Return records with pagination."""
        result = await self.db.execute(self.query().offset(skip).limit(limit))
        return list(result.scalars().all())

    async def count(self) -> int:
        stmt = self._apply_scope(select(func.count()).select_from(self.model))
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and run _on_after_create hook."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_create(obj)
        return obj

    def _pk_criteria(self, obj: ModelType) -> list[Any]:
        """Equality criteria on every primary key column of obj."""
        criteria = []
        for col in sa_inspect(self.model).primary_key:
            value = getattr(obj, col.key)
            if value is None:
                raise ValueError(
                    f"{self.model.__name__} has no value for primary key '{col.key}'"
                )
            criteria.append(getattr(self.model, col.key) == value)
        return criteria

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes to obj and run _on_after_update.

        A detached obj is merged only after a SELECT through query() finds
        its row, so filters from _apply_scope also guard updates.
        """
        if object_session(obj) is not self.db.sync_session:
            criteria = self._pk_criteria(obj)
            found = await self.db.execute(self.query().where(and_(*criteria)))
            if found.scalar_one_or_none() is None:
                ident = ",".join(
                    str(getattr(obj, c.key)) for c in sa_inspect(self.model).primary_key
                )
                raise ResourceNotFoundException(self.model.__name__, ident)
            obj = await self.db.merge(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        await self._on_after_update(obj)
        return obj

    async def delete(self, obj: ModelType) -> None:
        """Run _on_before_delete hook then delete the record."""
        await self._on_before_delete(obj)
        await self.db.delete(obj)
        await self.db.flush()

    async def update_where(self, values: dict[str, Any], *criteria: Any) -> int:
        """Bulk UPDATE rows matching criteria. Returns the affected row count."""
        stmt = self._apply_scope(sa_update(self.model).where(*criteria).values(**values))
        result = await self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount

    async def delete_where(self, *criteria: Any) -> int:
        """Bulk DELETE rows matching criteria. Returns the affected row count."""
        stmt = self._apply_scope(sa_delete(self.model).where(*criteria))
        result = await self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount

    async def _on_after_create(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches or emit events."""

    async def _on_after_update(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches or emit events."""

    async def _on_before_delete(self, obj: ModelType) -> None:
        """Override in subclasses to invalidate caches or emit events."""
