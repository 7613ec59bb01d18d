"""
Data Transfer Objects для товаров.

DTO изолируют внутреннюю структуру доменных сущностей
от внешнего API и других слоев.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from ...domain.product_context.entities import Product


class ProductDTO(BaseModel):
    """
    DTO товара.
    
    Атрибуты:
        id: ID товара
        name: Название
        price: Цена
        stock: Остаток на складе
        created_at: Время создания
        updated_at: Время последнего изменения
    """
    
    id: int = Field(description="ID товара")
    name: str = Field(description="Название товара")
    price: float = Field(description="Цена")
    stock: int = Field(description="Остаток на складе")
    created_at: datetime = Field(description="Время создания")
    updated_at: Optional[datetime] = Field(default=None, description="Время последнего изменения")
    
    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        """
        Создать DTO из доменной сущности.
        
        Args:
            product: Сохраненный товар (id не None)
            
        Returns:
            DTO товара
        """
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            created_at=product.created_at,
            updated_at=product.updated_at
        )


class ProductListDTO(BaseModel):
    """DTO страницы списка товаров."""
    
    items: List[ProductDTO] = Field(description="Товары на странице")
    total: int = Field(description="Общее количество товаров")
    limit: int = Field(description="Размер страницы")
    offset: int = Field(description="Смещение")
