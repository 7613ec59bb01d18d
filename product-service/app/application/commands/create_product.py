"""
Команда создания товара.
"""

from pydantic import Field

from .base import Command, CommandHandler
from ...domain.product_context.entities import Product
from ...domain.product_context.repositories import ProductRepository


class CreateProductCommand(Command):
    """
    Команда создания нового товара.
    
    Атрибуты:
        name: Название товара
        price: Цена
        stock: Начальный остаток
    
    Пример:
        >>> command = CreateProductCommand(name="Keyboard", price=49.9, stock=10)
    """
    
    name: str = Field(description="Название товара")
    price: float = Field(description="Цена")
    stock: int = Field(default=0, description="Начальный остаток")


class CreateProductHandler(CommandHandler[int]):
    """
    Обработчик команды создания товара.
    
    Создает сущность, сохраняет ее в репозиторий и
    возвращает сгенерированный идентификатор.
    
    Пример:
        >>> handler = CreateProductHandler(repository)
        >>> product_id = await handler.handle(
        ...     CreateProductCommand(name="Keyboard", price=49.9, stock=10)
        ... )
        >>> product_id > 0
        True
    """
    
    def __init__(self, repository: ProductRepository):
        """
        Args:
            repository: Репозиторий товаров
        """
        self._repository = repository
    
    async def handle(self, command: CreateProductCommand) -> int:
        """
        Обработать команду создания товара.
        
        Returns:
            ID созданного товара
            
        Raises:
            InvalidStockError: Если начальный остаток отрицательный
        """
        product = Product.create(
            name=command.name,
            price=command.price,
            stock=command.stock
        )
        
        product = await self._repository.add(product)
        return product.id
