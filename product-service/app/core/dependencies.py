"""
FastAPI dependency injection providers.

Собирает цепочку Router -> Mediator -> Handler -> Repository -> AsyncSession
на каждый HTTP-запрос.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.mediator import Mediator
from app.application.commands import (
    CreateProductCommand,
    CreateProductHandler,
    UpdateStockCommand,
    UpdateStockHandler,
    UpdateProductCommand,
    UpdateProductHandler,
    DeleteProductCommand,
    DeleteProductHandler,
)
from app.application.queries import (
    GetProductQuery,
    GetProductHandler,
    ListProductsQuery,
    ListProductsHandler,
)
from app.domain.product_context.repositories import ProductRepository
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import ProductRepositoryImpl


def get_product_repository(db: AsyncSession = Depends(get_db)) -> ProductRepository:
    """Create ProductRepository bound to the request's DB session"""
    return ProductRepositoryImpl(db)


def build_mediator(repository: ProductRepository) -> Mediator:
    """
    Register all product command and query handlers.
    
    Args:
        repository: Product repository shared by all handlers
        
    Returns:
        Mediator instance
    """
    return (
        Mediator()
        .register(CreateProductCommand, CreateProductHandler(repository))
        .register(UpdateStockCommand, UpdateStockHandler(repository))
        .register(UpdateProductCommand, UpdateProductHandler(repository))
        .register(DeleteProductCommand, DeleteProductHandler(repository))
        .register(GetProductQuery, GetProductHandler(repository))
        .register(ListProductsQuery, ListProductsHandler(repository))
    )


def get_mediator(
    repository: ProductRepository = Depends(get_product_repository),
) -> Mediator:
    """Get request-scoped Mediator"""
    return build_mediator(repository)
