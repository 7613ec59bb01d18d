"""
Mappers для преобразования между доменными сущностями и моделями БД.
"""

from .product_mapper import ProductMapper

__all__ = ["ProductMapper"]
