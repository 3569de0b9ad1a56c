"""In-memory product repository seeded with sample data."""

import asyncio
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from framework.config import settings
from framework.logging.logger import get_logger
from framework.repository.base import changed_fields
from ..data import MOCK_PRODUCTS
from ..models import Product, ProductCreate, ProductUpdate, SearchFilters
from .base import IProductRepository

logger = get_logger("mock_product_repository")

# Simulated round-trip per operation, in seconds
LATENCY = {
    "get_all": 0.5,
    "get_by_id": 0.3,
    "create": 0.4,
    "update": 0.4,
    "delete": 0.3,
    "get_by_category": 0.3,
    "get_in_stock": 0.3,
    "search": 0.4,
}


class MockProductRepository(IProductRepository):
    """
    Keeps a private copy of the seed catalog and answers after a simulated delay.

    Mutations are applied before the delay; only the completion is postponed,
    so no two calls ever interleave inside a mutation.
    """

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        latency_factor: Optional[float] = None
    ):
        seed = MOCK_PRODUCTS if products is None else products
        self._products: List[Product] = [p.model_copy(deep=True) for p in seed]
        self.latency_factor = (
            settings.MOCK_LATENCY_FACTOR if latency_factor is None else latency_factor
        )

    async def _respond(self, operation: str, result):
        delay = LATENCY[operation] * self.latency_factor
        if delay > 0:
            await asyncio.sleep(delay)
        return result

    def _copies(self, products: Iterable[Product]) -> List[Product]:
        return [p.model_copy() for p in products]

    def _index_of(self, id: int) -> int:
        for index, product in enumerate(self._products):
            if product.id == id:
                return index
        return -1

    def _next_id(self) -> int:
        return max((p.id for p in self._products), default=0) + 1

    async def get_all(self) -> List[Product]:
        return await self._respond("get_all", self._copies(self._products))

    async def get_by_id(self, id: int) -> Optional[Product]:
        index = self._index_of(id)
        product = self._products[index].model_copy() if index != -1 else None
        return await self._respond("get_by_id", product)

    async def create(self, data: ProductCreate) -> Product:
        product = Product(
            id=self._next_id(),
            created_at=datetime.now(timezone.utc),
            **data.model_dump()
        )
        self._products.append(product)
        logger.debug(f"Created product {product.id} ({product.name!r})")
        return await self._respond("create", product.model_copy())

    async def update(self, id: int, changes: ProductUpdate) -> Optional[Product]:
        index = self._index_of(id)
        if index == -1:
            logger.debug(f"Update skipped, product {id} not found")
            return await self._respond("update", None)

        updated = self._products[index].model_copy(update=changed_fields(changes))
        self._products[index] = updated
        logger.debug(f"Updated product {id}")
        return await self._respond("update", updated.model_copy())

    async def delete(self, id: int) -> bool:
        index = self._index_of(id)
        if index == -1:
            return await self._respond("delete", False)

        del self._products[index]
        logger.debug(f"Deleted product {id}")
        return await self._respond("delete", True)

    async def get_by_category(self, category: str) -> List[Product]:
        filtered = [p for p in self._products if p.category == category]
        return await self._respond("get_by_category", self._copies(filtered))

    async def get_in_stock(self) -> List[Product]:
        filtered = [p for p in self._products if p.in_stock]
        return await self._respond("get_in_stock", self._copies(filtered))

    async def search(self, query: str, filters: Optional[SearchFilters] = None) -> List[Product]:
        term = query.lower()
        filtered = [
            p for p in self._products
            if term in p.name.lower() or term in p.description.lower()
        ]
        if filters is not None:
            filtered = [p for p in filtered if filters.matches(p)]
        return await self._respond("search", self._copies(filtered))
