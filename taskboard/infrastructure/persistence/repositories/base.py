"""Base repository: primary-key lookup, per-write commit, and integrity mapping."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.exceptions import ValidationException
from taskboard.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_orm, add, remove and commit.

    Each public write of a subclass ends in _commit(), so a write that returns
    is durable and a write that raises has been rolled back.
    """

    # Wire name of the field reported when a foreign key is violated.
    integrity_field: str | None = None

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_orm(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _add(self, obj: ModelType) -> ModelType:
        """Insert obj and commit."""
        self.db.add(obj)
        await self._commit()
        return obj

    async def _remove(self, obj: ModelType) -> None:
        """Delete obj and commit."""
        await self.db.delete(obj)
        await self._commit()

    async def _commit(self) -> None:
        """Commit; roll back and raise ValidationException on constraint violations."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ValidationException(
                f"{self.model.__name__} references an unknown record",
                field=self.integrity_field,
            ) from e
