"""
Реализация ProductRepository с использованием SQLAlchemy.

Конкретная реализация интерфейса ProductRepository для работы с БД.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select, func, delete

from ....core.errors import ProductNotFoundError, RepositoryError
from ....domain.product_context.entities import Product
from ....domain.product_context.repositories import ProductRepository
from ..models import ProductModel
from ..mappers import ProductMapper

logger = logging.getLogger("product-service.infrastructure.product_repository")


class ProductRepositoryImpl(ProductRepository):
    """
    Реализация репозитория товаров для SQLAlchemy.
    
    Репозиторий не коммитит транзакцию: границы транзакции
    задает владелец сессии (get_db для HTTP-запросов).
    
    Атрибуты:
        _db: Сессия БД SQLAlchemy
        _mapper: Mapper для преобразования данных
    
    Пример:
        >>> repo = ProductRepositoryImpl(db_session)
        >>> product = await repo.add(Product.create(name="Mouse", price=9.5, stock=3))
        >>> product.id
        1
    """
    
    def __init__(self, db: AsyncSession):
        """
        Args:
            db: Сессия БД SQLAlchemy
        """
        self._db = db
        self._mapper = ProductMapper()
    
    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Найти товар по ID.
        
        Returns:
            Product или None если не найден
        """
        model = await self._get_model(product_id)
        
        if not model:
            logger.debug(f"Product {product_id} not found")
            return None
        
        return self._mapper.to_entity(model)
    
    async def add(self, product: Product) -> Product:
        """
        Сохранить новый товар.
        
        Выполняет flush, чтобы БД сгенерировала ID до коммита.
        """
        model = self._mapper.to_model(product)
        try:
            self._db.add(model)
            await self._db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to add product: {e}", exc_info=True)
            raise RepositoryError(
                operation="add",
                entity_type="Product",
                reason=str(e)
            ) from e
        
        product.id = model.id
        logger.info(f"Added product {product.id} ({product.name})")
        return product
    
    async def update(self, product: Product) -> None:
        """Сохранить изменения товара."""
        model = await self._get_model(product.id)
        if not model:
            raise ProductNotFoundError(product.id)
        
        self._mapper.update_model(model, product)
        try:
            await self._db.flush()
        except SQLAlchemyError as e:
            logger.error(f"Failed to update product {product.id}: {e}", exc_info=True)
            raise RepositoryError(
                operation="update",
                entity_type="Product",
                reason=str(e),
                details={"product_id": product.id}
            ) from e
        
        logger.debug(f"Updated product {product.id}")
    
    async def remove(self, product_id: int) -> None:
        """Удалить товар."""
        try:
            result = await self._db.execute(
                delete(ProductModel).where(ProductModel.id == product_id)
            )
        except SQLAlchemyError as e:
            raise RepositoryError(
                operation="remove",
                entity_type="Product",
                reason=str(e),
                details={"product_id": product_id}
            ) from e
        
        if result.rowcount == 0:
            raise ProductNotFoundError(product_id)
        
        logger.info(f"Removed product {product_id}")
    
    async def exists(self, product_id: int) -> bool:
        result = await self._db.execute(
            select(func.count()).select_from(ProductModel).where(ProductModel.id == product_id)
        )
        return result.scalar_one() > 0
    
    async def list_all(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[Product]:
        """Получить товары, упорядоченные по ID."""
        stmt = select(ProductModel).order_by(ProductModel.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)
        
        result = await self._db.execute(stmt)
        models = result.scalars().all()
        
        logger.debug(f"Listed {len(models)} products")
        return [self._mapper.to_entity(model) for model in models]
    
    async def count(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(ProductModel)
        )
        return result.scalar_one()
    
    async def _get_model(self, product_id: int) -> Optional[ProductModel]:
        result = await self._db.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        return result.scalar_one_or_none()
