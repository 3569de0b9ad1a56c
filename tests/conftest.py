"""Test config and shared fixtures."""
import pytest
from datetime import datetime, timezone
from typing import AsyncGenerator, List
from httpx import AsyncClient, ASGITransport

from main import app
from framework.config import settings
from apps.products.api.router import get_product_repository
from apps.products.models import Product
from apps.products.repositories import HttpProductRepository, MockProductRepository
from apps.products.service import ProductService


API_BASE = f"http://test{settings.API_V1_PRODUCTS_PREFIX}"


def make_product(id: int, **fields) -> Product:
    """Build a product with sensible defaults for the fields a test doesn't care about."""
    values = {
        "name": f"Product {id}",
        "price": 10.0,
        "description": "",
        "category": "General",
        "in_stock": True,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    values.update(fields)
    return Product(id=id, **values)


@pytest.fixture
def sample_products() -> List[Product]:
    """Small catalog covering categories, stock and price spread."""
    return [
        make_product(1, name="Gaming Laptop", price=1299.0,
                     description="Fast laptop for games", category="Electronics"),
        make_product(2, name="Smartphone", price=899.0,
                     description="Flagship phone", category="Electronics"),
        make_product(3, name="Phone Charger", price=25.0,
                     description="USB-C charger for any phone", category="Accessories"),
        make_product(4, name="Budget Phone", price=199.0,
                     description="Entry-level phone", category="Electronics", in_stock=False),
        make_product(5, name="Coffee Mug", price=12.5,
                     description="Ceramic mug", category="Home & Kitchen"),
    ]


@pytest.fixture
def repository(sample_products) -> MockProductRepository:
    """In-memory repository without simulated latency."""
    return MockProductRepository(products=sample_products, latency_factor=0)


@pytest.fixture
def service(repository) -> ProductService:
    return ProductService(repository)


@pytest.fixture
async def client(repository) -> AsyncGenerator[AsyncClient, None]:
    """Test client for the catalog API, backed by the in-memory repository fixture."""
    app.dependency_overrides[get_product_repository] = lambda: repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def http_repository(client) -> HttpProductRepository:
    """HTTP repository talking to the catalog API through the ASGI test client."""
    return HttpProductRepository(base_url=API_BASE, client=client)
