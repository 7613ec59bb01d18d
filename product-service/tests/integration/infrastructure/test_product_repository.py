"""
Integration тесты для ProductRepositoryImpl.

Проверяет работу репозитория с реальной БД (SQLite in-memory).
"""

import pytest

from app.application.commands import CreateProductCommand, CreateProductHandler
from app.core.errors import ProductNotFoundError
from app.domain.product_context.entities import Product
from app.infrastructure.persistence.repositories import ProductRepositoryImpl


class TestProductRepositoryImpl:
    """Integration тесты для ProductRepositoryImpl"""
    
    @pytest.mark.asyncio
    async def test_add_assigns_positive_id(self, db_session):
        """Тест сохранения товара и генерации ID"""
        repository = ProductRepositoryImpl(db_session)
        
        product = await repository.add(Product.create(name="Keyboard", price=49.9, stock=10))
        
        assert product.id is not None
        assert product.id > 0
    
    @pytest.mark.asyncio
    async def test_create_handler_returns_positive_id(self, db_session):
        """Создание товара с валидными данными возвращает положительный ID"""
        handler = CreateProductHandler(ProductRepositoryImpl(db_session))
        
        product_id = await handler.handle(
            CreateProductCommand(name="Keyboard", price=49.9, stock=10)
        )
        
        assert product_id > 0
    
    @pytest.mark.asyncio
    async def test_save_and_find_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        created = await repository.add(Product.create(name="Mouse", price=9.5, stock=3))
        
        found = await repository.find_by_id(created.id)
        
        assert found is not None
        assert found == created
        assert found.name == "Mouse"
        assert found.price == 9.5
        assert found.stock == 3
        assert found.created_at.tzinfo is not None
    
    @pytest.mark.asyncio
    async def test_find_nonexistent_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        
        found = await repository.find_by_id(999)
        
        assert found is None
    
    @pytest.mark.asyncio
    async def test_update_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        product = await repository.add(Product.create(name="Mouse", price=9.5, stock=3))
        
        product.update_stock(8)
        product.update_details(name="Wireless Mouse", price=19.0)
        await repository.update(product)
        
        found = await repository.find_by_id(product.id)
        assert found.stock == 8
        assert found.name == "Wireless Mouse"
        assert found.price == 19.0
        assert found.updated_at is not None
    
    @pytest.mark.asyncio
    async def test_update_missing_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        
        with pytest.raises(ProductNotFoundError):
            await repository.update(Product(id=404, name="Ghost", price=1.0, stock=0))
    
    @pytest.mark.asyncio
    async def test_remove_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        product = await repository.add(Product.create(name="Mouse", price=9.5, stock=3))
        
        await repository.remove(product.id)
        
        assert await repository.exists(product.id) is False
        assert await repository.find_by_id(product.id) is None
    
    @pytest.mark.asyncio
    async def test_remove_missing_product(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        
        with pytest.raises(ProductNotFoundError):
            await repository.remove(12345)
    
    @pytest.mark.asyncio
    async def test_list_and_count(self, db_session):
        repository = ProductRepositoryImpl(db_session)
        for i in range(5):
            await repository.add(Product.create(name=f"Product {i}", price=float(i), stock=i))
        
        page = await repository.list_all(limit=2, offset=1)
        everything = await repository.list_all()
        
        assert [p.name for p in page] == ["Product 1", "Product 2"]
        assert len(everything) == 5
        assert await repository.count() == 5
        assert await repository.exists(everything[0].id) is True
