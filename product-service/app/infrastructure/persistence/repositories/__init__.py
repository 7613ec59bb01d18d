"""
Реализации репозиториев.
"""

from .product_repository_impl import ProductRepositoryImpl

__all__ = ["ProductRepositoryImpl"]
