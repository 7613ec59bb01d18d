"""
SQLAlchemy модели для персистентности.

Модели используются только в Infrastructure Layer.
"""

from .base import Base
from .product import ProductModel

__all__ = [
    "Base",
    "ProductModel",
]
