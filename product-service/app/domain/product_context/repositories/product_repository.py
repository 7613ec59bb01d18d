"""
Product Repository Interface.

Определяет контракт для персистентности Product entities.
"""

from abc import abstractmethod
from typing import List, Optional

from ...shared.repository import Repository
from ..entities import Product


class ProductRepository(Repository[Product, int]):
    """
    Repository interface для Product entities.
    
    Реализация находится в infrastructure слое.
    
    Методы:
        - find_by_id: Найти товар по ID
        - add: Сохранить новый товар и получить сгенерированный ID
        - update: Сохранить изменения товара
        - remove: Удалить товар
        - exists: Проверить существование
        - list_all: Список товаров с пагинацией
        - count: Общее количество товаров
    """
    
    @abstractmethod
    async def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Найти товар по ID.
        
        Args:
            product_id: ID товара
            
        Returns:
            Product или None если не найден
        """
        pass
    
    @abstractmethod
    async def add(self, product: Product) -> Product:
        """
        Сохранить новый товар.
        
        Args:
            product: Новый товар (id=None)
            
        Returns:
            Тот же товар с присвоенным положительным ID
        """
        pass
    
    @abstractmethod
    async def update(self, product: Product) -> None:
        """
        Сохранить изменения товара.
        
        Raises:
            ProductNotFoundError: Если товар отсутствует в хранилище
        """
        pass
    
    @abstractmethod
    async def remove(self, product_id: int) -> None:
        """
        Удалить товар.
        
        Raises:
            ProductNotFoundError: Если товар не найден
        """
        pass
    
    @abstractmethod
    async def exists(self, product_id: int) -> bool:
        pass
    
    @abstractmethod
    async def list_all(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None
    ) -> List[Product]:
        """
        Получить товары, упорядоченные по ID.
        
        Args:
            limit: Максимальное количество результатов
            offset: Смещение для пагинации
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        pass
