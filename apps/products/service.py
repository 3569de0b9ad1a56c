from typing import List, Optional
from framework.logging.logger import get_logger
from .models import Product, ProductCreate, ProductUpdate, SearchFilters
from .repositories.base import IProductRepository

logger = get_logger("product_service")

DEFAULT_EXPENSIVE_THRESHOLD = 100


class ProductService:
    """Catalog use cases; delegates storage to whichever repository was bound."""

    def __init__(self, repository: IProductRepository):
        """Initialize ProductService with a product repository."""
        self.repository = repository

    async def get_products(self) -> List[Product]:
        return await self.repository.get_all()

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return await self.repository.get_by_id(product_id)

    async def create_product(self, data: ProductCreate) -> Product:
        product = await self.repository.create(data)
        logger.info(f"Product {product.id} created: {product.name!r}")
        return product

    async def update_product(self, product_id: int, changes: ProductUpdate) -> Optional[Product]:
        product = await self.repository.update(product_id, changes)
        if product is None:
            logger.info(f"Product {product_id} not found, nothing updated")
        return product

    async def delete_product(self, product_id: int) -> bool:
        deleted = await self.repository.delete(product_id)
        if deleted:
            logger.info(f"Product {product_id} deleted")
        return deleted

    async def get_products_by_category(self, category: str) -> List[Product]:
        return await self.repository.get_by_category(category)

    async def get_products_in_stock(self) -> List[Product]:
        return await self.repository.get_in_stock()

    async def search_products(
        self,
        query: str,
        filters: Optional[SearchFilters] = None
    ) -> List[Product]:
        return await self.repository.search(query, filters)

    async def get_expensive_products(
        self,
        min_price: float = DEFAULT_EXPENSIVE_THRESHOLD
    ) -> List[Product]:
        """Products priced at or above `min_price`, filtered on this side of the repository."""
        products = await self.repository.get_all()
        return [p for p in products if p.price >= min_price]

    async def get_products_by_price_range(
        self,
        min_price: float,
        max_price: float
    ) -> List[Product]:
        """Inclusive price range, expressed as an unconstrained search."""
        return await self.repository.search(
            "", SearchFilters(min_price=min_price, max_price=max_price)
        )
