from framework.logging.logger import get_logger
from .base import IProductRepository
from .http import HttpProductRepository
from .memory import MockProductRepository

logger = get_logger("repository_manager")

def create_product_repository(settings) -> IProductRepository:
    """Build the repository selected by settings.PRODUCT_REPOSITORY."""
    driver = (settings.PRODUCT_REPOSITORY or "mock").lower()
    if driver == "mock":
        return MockProductRepository(latency_factor=settings.MOCK_LATENCY_FACTOR)
    if driver == "http":
        return HttpProductRepository(
            base_url=settings.PRODUCTS_API_URL,
            timeout=settings.PRODUCTS_API_TIMEOUT,
            token=settings.PRODUCTS_API_TOKEN
        )
    raise ValueError(
        f"Unsupported PRODUCT_REPOSITORY={settings.PRODUCT_REPOSITORY!r}, expected mock or http"
    )


class RepositoryManager:
    """Holds the process-wide product repository bound at startup."""
    _instance = None

    def __init__(self, settings):
        self.products = create_product_repository(settings)
        logger.info(f"Product repository bound: {type(self.products).__name__}")

    @classmethod
    def get_instance(cls, settings=None):
        if cls._instance is None:
            if settings is None:
                from framework.config import settings as app_settings
                settings = app_settings
            cls._instance = cls(settings)
        return cls._instance

    @classmethod
    async def close(cls) -> None:
        """Release the bound repository (closes the HTTP client if any)."""
        if cls._instance is None:
            return
        repository = cls._instance.products
        if isinstance(repository, HttpProductRepository):
            await repository.aclose()
        cls._instance = None
