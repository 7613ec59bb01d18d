"""
Команда изменения остатка товара.
"""

from pydantic import Field

from .base import Command, CommandHandler
from ...core.errors import ProductNotFoundError
from ...domain.product_context.repositories import ProductRepository
from ..dto.product_dto import ProductDTO


class UpdateStockCommand(Command):
    """
    Команда установки нового остатка.
    
    Атрибуты:
        product_id: ID товара
        stock: Новое значение остатка
    """
    
    product_id: int = Field(description="ID товара")
    stock: int = Field(description="Новое значение остатка")


class UpdateStockHandler(CommandHandler[ProductDTO]):
    """
    Обработчик команды изменения остатка.
    
    Проверка на отрицательный остаток выполняется сущностью
    до сохранения, поэтому отклоненная команда ничего не меняет в БД.
    """
    
    def __init__(self, repository: ProductRepository):
        self._repository = repository
    
    async def handle(self, command: UpdateStockCommand) -> ProductDTO:
        """
        Обработать команду изменения остатка.
        
        Returns:
            DTO обновленного товара
            
        Raises:
            ProductNotFoundError: Если товар не найден
            InvalidStockError: Если новый остаток отрицательный
        """
        product = await self._repository.find_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)
        
        product.update_stock(command.stock)
        await self._repository.update(product)
        
        return ProductDTO.from_entity(product)
