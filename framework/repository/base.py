"""
Repository abstract base class.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Any
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


class IRepository(ABC, Generic[T, CreateT, UpdateT]):
    """Repository interface; defines standard data access API.

    A missing id is a normal outcome: lookups and updates return None,
    deletes return False. Implementations raise only for transport failures.
    """

    @abstractmethod
    async def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, or None."""
        pass

    @abstractmethod
    async def create(self, data: CreateT) -> T:
        """Create entity; the repository assigns its identity."""
        pass

    @abstractmethod
    async def update(self, id: int, changes: UpdateT) -> Optional[T]:
        """Merge the explicitly set fields of `changes` into the entity."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Delete entity; True if something was removed."""
        pass


def changed_fields(changes: BaseModel) -> dict[str, Any]:
    """Fields the caller actually set on a partial-update model; an explicit None means "leave as is"."""
    return changes.model_dump(exclude_unset=True, exclude_none=True)
