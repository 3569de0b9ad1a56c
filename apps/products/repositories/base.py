"""Product repository interface."""

from abc import abstractmethod
from typing import List, Optional
from framework.repository.base import IRepository
from ..models import Product, ProductCreate, ProductUpdate, SearchFilters


class IProductRepository(IRepository[Product, ProductCreate, ProductUpdate]):
    """Catalog data access. Implemented by the in-memory and HTTP repositories."""

    @abstractmethod
    async def get_by_category(self, category: str) -> List[Product]:
        """Products whose category equals `category` exactly."""
        pass

    @abstractmethod
    async def get_in_stock(self) -> List[Product]:
        """Products currently in stock."""
        pass

    @abstractmethod
    async def search(self, query: str, filters: Optional[SearchFilters] = None) -> List[Product]:
        """
        Case-insensitive substring match of `query` against name or description,
        narrowed by every filter field that is set.

        An empty query matches every product; callers that want "no search" for
        blank input should call get_all() instead.
        """
        pass
