"""
Data Transfer Objects (DTO).
"""

from .product_dto import ProductDTO, ProductListDTO

__all__ = [
    "ProductDTO",
    "ProductListDTO",
]
