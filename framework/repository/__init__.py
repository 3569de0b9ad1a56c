"""
Repository pattern: data access abstraction, decouples service layer from the storage backend.
"""

from .base import IRepository, changed_fields

__all__ = ["IRepository", "changed_fields"]
