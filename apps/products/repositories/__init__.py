"""
Product repositories: one interface, two interchangeable backends.
"""

from .base import IProductRepository
from .http import HttpProductRepository
from .memory import MockProductRepository
from .manager import RepositoryManager, create_product_repository

__all__ = [
    "IProductRepository",
    "HttpProductRepository",
    "MockProductRepository",
    "RepositoryManager",
    "create_product_repository",
]
