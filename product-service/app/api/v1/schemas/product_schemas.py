"""
API схемы для операций с товарами.

Определяет структуру запросов и ответов для endpoints товаров.
Знак остатка здесь не проверяется: это инвариант доменной сущности.
"""

from typing import List
from pydantic import BaseModel, Field

from ....application.dto import ProductDTO

# Верхняя граница INTEGER в SQLite и BIGINT в PostgreSQL
MAX_DB_INTEGER = 2**63 - 1
# NUMERIC(12, 2)
MAX_PRICE = 9_999_999_999.99


class CreateProductRequest(BaseModel):
    """
    Запрос на создание товара.
    
    Пример:
        {
            "name": "Keyboard",
            "price": 49.9,
            "stock": 10
        }
    """
    
    name: str = Field(min_length=1, max_length=255, description="Название товара")
    price: float = Field(ge=0, le=MAX_PRICE, description="Цена")
    stock: int = Field(default=0, le=MAX_DB_INTEGER, description="Начальный остаток")


class CreateProductResponse(BaseModel):
    """
    Ответ на создание товара.
    
    Пример:
        {"id": 1}
    """
    
    id: int = Field(description="ID созданного товара")


class UpdateProductRequest(BaseModel):
    """Запрос на изменение названия и цены."""
    
    name: str = Field(min_length=1, max_length=255, description="Название товара")
    price: float = Field(ge=0, le=MAX_PRICE, description="Цена")


class UpdateStockRequest(BaseModel):
    """
    Запрос на изменение остатка.
    
    Пример:
        {"stock": 25}
    """
    
    stock: int = Field(le=MAX_DB_INTEGER, description="Новое значение остатка")


class ProductResponse(ProductDTO):
    """Данные товара в ответе API."""
    pass


class ProductListResponse(BaseModel):
    """
    Ответ на получение списка товаров.
    
    Атрибуты:
        items: Товары на странице
        total: Общее количество
        limit: Размер страницы
        offset: Смещение
    """
    
    items: List[ProductResponse] = Field(description="Товары")
    total: int = Field(description="Общее количество")
    limit: int = Field(description="Размер страницы")
    offset: int = Field(description="Смещение")
