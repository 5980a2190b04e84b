"""Base repository with common CRUD operations."""

from collections.abc import Sequence
from typing import Generic, TypeVar

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: str) -> ModelType | None:
        """Get a record by its primary key."""
        return await self.session.get(self.model, id)

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    def add_all(self, entities: Sequence[ModelType]) -> None:
        """Add several entities to session (no flush/commit)."""
        self.session.add_all(entities)

    async def delete_all(self) -> int:
        """Delete every record in the table. Returns the number of rows removed."""
        result = await self.session.execute(delete(self.model))
        return result.rowcount or 0
