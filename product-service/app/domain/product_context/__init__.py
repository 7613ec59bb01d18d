"""
Product Bounded Context.

Каталог товаров: сущность Product и контракт ее персистентности.
"""

from .entities import Product
from .repositories import ProductRepository

__all__ = ["Product", "ProductRepository"]
