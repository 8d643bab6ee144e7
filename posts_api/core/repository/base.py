"""Base repository class for database operations."""

from typing import Generic, List, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository class with common read operations."""

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        """Initialize the repository.

        Args:
            db: Database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def find_many(self) -> List[ModelType]:
        """Get all records in the storage layer's default order."""
        result = await self.db.execute(select(self.model))
        return list(result.scalars().all())
