"""
Presentation state for the product list screen.

Renderers read `products`, `loading`, `error` (or `status`) and forward raw
search input to `on_search`. All handlers are coroutines; the caller decides
whether to await them or schedule them as tasks.

Known behaviors kept as-is:
- Search, expensive and in-stock handlers do not touch `loading`, and do not
  clear a previous error before running. Only `load_products` does both.
- Overlapping searches are not sequenced; if an older search finishes after a
  newer one, its (stale) result wins.
"""

from typing import List, Optional
from framework.logging.logger import get_logger
from .models import Product
from .service import ProductService

logger = get_logger("product_list_view")

EXPENSIVE_THRESHOLD = 200

STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_ERROR = "error"


def error_message(exc: Exception) -> str:
    message = getattr(exc, "message", None) or str(exc)
    return message or type(exc).__name__


class ProductListView:
    """Tracks the product list, a loading flag and the last error message."""

    def __init__(self, service: ProductService):
        self.service = service
        self.products: List[Product] = []
        self.loading: bool = False
        self.error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.loading:
            return STATUS_LOADING
        if self.error is not None:
            return STATUS_ERROR
        return STATUS_IDLE

    async def init(self) -> None:
        """Initial fetch when the screen is first shown."""
        await self.load_products()

    async def load_products(self) -> None:
        self.loading = True
        self.error = None
        try:
            products = await self.service.get_products()
        except Exception as e:
            logger.warning(f"Loading products failed: {e}")
            self.error = error_message(e)
            self.loading = False
            return
        self.products = products
        self.loading = False

    async def on_search(self, text: str) -> None:
        query = text.strip()
        if not query:
            await self.load_products()
            return
        try:
            self.products = await self.service.search_products(query)
        except Exception as e:
            logger.warning(f"Search {query!r} failed: {e}")
            self.error = error_message(e)

    async def show_expensive_products(self) -> None:
        try:
            self.products = await self.service.get_expensive_products(EXPENSIVE_THRESHOLD)
        except Exception as e:
            logger.warning(f"Loading expensive products failed: {e}")
            self.error = error_message(e)

    async def show_products_in_stock(self) -> None:
        try:
            self.products = await self.service.get_products_in_stock()
        except Exception as e:
            logger.warning(f"Loading in-stock products failed: {e}")
            self.error = error_message(e)
