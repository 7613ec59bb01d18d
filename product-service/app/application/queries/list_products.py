"""
Запрос получения списка товаров.
"""

from pydantic import Field

from .base import Query, QueryHandler
from ...domain.product_context.repositories import ProductRepository
from ..dto.product_dto import ProductDTO, ProductListDTO


class ListProductsQuery(Query):
    """
    Запрос списка товаров с пагинацией.
    
    Атрибуты:
        limit: Максимальное количество товаров
        offset: Смещение для пагинации
    """
    
    limit: int = Field(default=100, ge=1, le=1000, description="Максимальное количество")
    offset: int = Field(default=0, ge=0, description="Смещение")


class ListProductsHandler(QueryHandler[ProductListDTO]):
    """Обработчик запроса списка товаров."""
    
    def __init__(self, repository: ProductRepository):
        self._repository = repository
    
    async def handle(self, query: ListProductsQuery) -> ProductListDTO:
        products = await self._repository.list_all(
            limit=query.limit,
            offset=query.offset
        )
        total = await self._repository.count()
        
        return ProductListDTO(
            items=[ProductDTO.from_entity(p) for p in products],
            total=total,
            limit=query.limit,
            offset=query.offset
        )
