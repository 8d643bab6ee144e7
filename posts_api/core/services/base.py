from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseService(ABC, Generic[T]):
    """Session-bound service returning ``T`` models."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    def from_db(cls, db: AsyncSession) -> "BaseService[T]":
        """Factory used by the service registry."""
        return cls(db)

    @abstractmethod
    async def health_check(self) -> bool:
        """Return whether the backing storage answers."""
