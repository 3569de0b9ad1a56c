"""Sample catalog used to seed the in-memory repository."""

from datetime import datetime, timezone
from typing import List
from .models import Product

MOCK_PRODUCTS: List[Product] = [
    Product(
        id=1,
        name="Gaming Laptop",
        price=1299.99,
        description="High-performance laptop with RTX graphics and a 165Hz display",
        category="Electronics",
        in_stock=True,
        created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
    ),
    Product(
        id=2,
        name="Smartphone Pro",
        price=999.0,
        description="Flagship phone with triple camera system",
        category="Electronics",
        in_stock=True,
        created_at=datetime(2024, 2, 1, tzinfo=timezone.utc),
    ),
    Product(
        id=3,
        name="Wireless Headphones",
        price=199.5,
        description="Noise-cancelling over-ear headphones with phone pairing",
        category="Electronics",
        in_stock=False,
        created_at=datetime(2024, 2, 20, tzinfo=timezone.utc),
    ),
    Product(
        id=4,
        name="Budget Phone",
        price=249.0,
        description="Affordable smartphone with long battery life",
        category="Electronics",
        in_stock=True,
        created_at=datetime(2024, 3, 5, tzinfo=timezone.utc),
    ),
    Product(
        id=5,
        name="Coffee Maker",
        price=89.99,
        description="Programmable drip coffee maker, 12 cups",
        category="Home & Kitchen",
        in_stock=True,
        created_at=datetime(2024, 3, 18, tzinfo=timezone.utc),
    ),
    Product(
        id=6,
        name="Running Shoes",
        price=129.0,
        description="Lightweight running shoes with responsive cushioning",
        category="Sports",
        in_stock=False,
        created_at=datetime(2024, 4, 2, tzinfo=timezone.utc),
    ),
    Product(
        id=7,
        name="Desk Lamp",
        price=35.0,
        description="LED desk lamp with adjustable brightness",
        category="Home & Kitchen",
        in_stock=True,
        created_at=datetime(2024, 4, 22, tzinfo=timezone.utc),
    ),
    Product(
        id=8,
        name="Phone Case",
        price=19.99,
        description="Shockproof case for Smartphone Pro",
        category="Accessories",
        in_stock=True,
        created_at=datetime(2024, 5, 10, tzinfo=timezone.utc),
    ),
]
