"""
Products роутер.

Предоставляет CRUD endpoints для товаров. Каждый endpoint создает
команду или запрос и передает его в Mediator. Доменные ошибки
(товар не найден, отрицательный остаток) превращаются в HTTP ответы
в app.api.error_handlers.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from ..schemas.product_schemas import (
    MAX_DB_INTEGER,
    CreateProductRequest,
    CreateProductResponse,
    UpdateProductRequest,
    UpdateStockRequest,
    ProductResponse,
    ProductListResponse
)
from ....application.mediator import Mediator
from ....application.commands import (
    CreateProductCommand,
    UpdateStockCommand,
    UpdateProductCommand,
    DeleteProductCommand
)
from ....application.queries import GetProductQuery, ListProductsQuery
from ....core.errors import ProductNotFoundError
from ....core.dependencies import get_mediator

logger = logging.getLogger("product-service.api.products")

router = APIRouter(prefix="/products", tags=["products"])

ProductId = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER, description="ID товара")]


@router.post("", response_model=CreateProductResponse, status_code=201)
async def create_product(
    request: CreateProductRequest,
    mediator: Mediator = Depends(get_mediator)
) -> CreateProductResponse:
    """
    Создать новый товар.
    
    Ответы:
        201: ID созданного товара
        400: Начальный остаток отрицательный
        
    Пример запроса:
        POST /products
        {"name": "Keyboard", "price": 49.9, "stock": 10}
        
    Пример ответа:
        {"id": 1}
    """
    command = CreateProductCommand(
        name=request.name,
        price=request.price,
        stock=request.stock
    )
    product_id = await mediator.send(command)
    
    logger.info(f"Created product: {product_id}")
    return CreateProductResponse(id=product_id)


@router.get("", response_model=ProductListResponse)
async def list_products(
    limit: int = Query(100, ge=1, le=1000, description="Максимальное количество"),
    offset: int = Query(0, ge=0, le=MAX_DB_INTEGER, description="Смещение"),
    mediator: Mediator = Depends(get_mediator)
) -> ProductListResponse:
    """
    Получить список товаров.
    
    Пример запроса:
        GET /products?limit=10&offset=0
    """
    page = await mediator.send(ListProductsQuery(limit=limit, offset=offset))
    
    return ProductListResponse(
        items=[ProductResponse(**item.model_dump()) for item in page.items],
        total=page.total,
        limit=page.limit,
        offset=page.offset
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: ProductId,
    mediator: Mediator = Depends(get_mediator)
) -> ProductResponse:
    """
    Получить товар по ID.
    
    Ответы:
        200: Данные товара
        404: Товар не найден
        
    Пример ответа:
        {
            "id": 1,
            "name": "Keyboard",
            "price": 49.9,
            "stock": 10,
            "created_at": "2026-01-18T21:00:00Z",
            "updated_at": null
        }
    """
    product_dto = await mediator.send(GetProductQuery(product_id=product_id))
    
    if not product_dto:
        raise ProductNotFoundError(product_id)
    
    return ProductResponse(**product_dto.model_dump())


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    request: UpdateProductRequest,
    product_id: ProductId,
    mediator: Mediator = Depends(get_mediator)
) -> ProductResponse:
    """
    Изменить название и цену товара.
    
    Ответы:
        200: Обновленный товар
        404: Товар не найден
    """
    command = UpdateProductCommand(
        product_id=product_id,
        name=request.name,
        price=request.price
    )
    product_dto = await mediator.send(command)
    
    logger.info(f"Updated product: {product_id}")
    return ProductResponse(**product_dto.model_dump())


@router.patch("/{product_id}/stock", response_model=ProductResponse)
async def update_stock(
    request: UpdateStockRequest,
    product_id: ProductId,
    mediator: Mediator = Depends(get_mediator)
) -> ProductResponse:
    """
    Установить остаток товара.
    
    Ответы:
        200: Обновленный товар
        400: Остаток отрицательный
        404: Товар не найден
        
    Пример запроса:
        PATCH /products/1/stock
        {"stock": 25}
    """
    command = UpdateStockCommand(product_id=product_id, stock=request.stock)
    product_dto = await mediator.send(command)
    
    logger.info(f"Updated stock of product {product_id}: {product_dto.stock}")
    return ProductResponse(**product_dto.model_dump())


@router.delete("/{product_id}", status_code=204)
async def delete_product(
    product_id: ProductId,
    mediator: Mediator = Depends(get_mediator)
) -> Response:
    """
    Удалить товар.
    
    Ответы:
        204: Товар удален
        404: Товар не найден
    """
    await mediator.send(DeleteProductCommand(product_id=product_id))
    
    logger.info(f"Deleted product: {product_id}")
    return Response(status_code=204)
