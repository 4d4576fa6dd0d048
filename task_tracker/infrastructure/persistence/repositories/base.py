"""Base repository: generic lookup, insert and delete on one ORM model."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from task_tracker.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, exists, add, delete.

    Works inside the caller's session; flushes but never commits (the
    session dependency owns the transaction).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get(self, entity_id: Any) -> ModelType | None:
        """Return a single ORM row by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def exists(self, entity_id: Any) -> bool:
        """Return True if a row with this primary key exists."""
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.id == entity_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def _add(self, obj: ModelType) -> ModelType:
        """Persist a new row and reload server-assigned columns."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def _save(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached row and reload it."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def _delete(self, obj: ModelType) -> None:
        await self.db.delete(obj)
        await self.db.flush()
