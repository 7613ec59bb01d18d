"""
Queries (Запросы).

Запросы представляют намерение получить данные без изменения состояния.
Следуют паттерну CQRS (Command Query Responsibility Segregation).
"""

from .base import Query, QueryHandler
from .get_product import GetProductQuery, GetProductHandler
from .list_products import ListProductsQuery, ListProductsHandler

__all__ = [
    "Query",
    "QueryHandler",
    "GetProductQuery",
    "GetProductHandler",
    "ListProductsQuery",
    "ListProductsHandler",
]
