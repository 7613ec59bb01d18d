"""
API схемы v1.
"""

from .health_schemas import HealthResponse
from .product_schemas import (
    CreateProductRequest,
    CreateProductResponse,
    UpdateProductRequest,
    UpdateStockRequest,
    ProductResponse,
    ProductListResponse,
)

__all__ = [
    "HealthResponse",
    "CreateProductRequest",
    "CreateProductResponse",
    "UpdateProductRequest",
    "UpdateStockRequest",
    "ProductResponse",
    "ProductListResponse",
]
