"""
Кастомные исключения для Product Service.
"""

from .base import (
    ProductServiceError,
    DomainError,
    InfrastructureError,
    ApplicationError
)

from .domain_errors import (
    ProductNotFoundError,
    InvalidStockError,
    InvalidProductError
)

from .application_errors import HandlerNotRegisteredError

from .infrastructure_errors import (
    RepositoryError,
    DatabaseError
)

__all__ = [
    # Базовые исключения
    "ProductServiceError",
    "DomainError",
    "InfrastructureError",
    "ApplicationError",
    
    # Доменные исключения
    "ProductNotFoundError",
    "InvalidStockError",
    "InvalidProductError",
    
    # Прикладные исключения
    "HandlerNotRegisteredError",
    
    # Инфраструктурные исключения
    "RepositoryError",
    "DatabaseError",
]
