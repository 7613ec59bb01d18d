"""
Запрос получения товара по ID.
"""

from typing import Optional
from pydantic import Field

from .base import Query, QueryHandler
from ...domain.product_context.repositories import ProductRepository
from ..dto.product_dto import ProductDTO


class GetProductQuery(Query):
    """
    Запрос получения товара по ID.
    
    Пример:
        >>> query = GetProductQuery(product_id=1)
    """
    
    product_id: int = Field(description="ID товара")


class GetProductHandler(QueryHandler[Optional[ProductDTO]]):
    """
    Обработчик запроса получения товара.
    
    Пример:
        >>> handler = GetProductHandler(repository)
        >>> dto = await handler.handle(GetProductQuery(product_id=1))
        >>> if dto:
        ...     print(f"Found product: {dto.name}")
    """
    
    def __init__(self, repository: ProductRepository):
        """
        Args:
            repository: Репозиторий товаров
        """
        self._repository = repository
    
    async def handle(self, query: GetProductQuery) -> Optional[ProductDTO]:
        """
        Обработать запрос получения товара.
        
        Returns:
            DTO товара если найден, None иначе
        """
        product = await self._repository.find_by_id(query.product_id)
        
        if not product:
            return None
        
        return ProductDTO.from_entity(product)
