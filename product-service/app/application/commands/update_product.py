"""
Команда изменения названия и цены товара.
"""

from pydantic import Field

from .base import Command, CommandHandler
from ...core.errors import ProductNotFoundError
from ...domain.product_context.repositories import ProductRepository
from ..dto.product_dto import ProductDTO


class UpdateProductCommand(Command):
    """
    Команда обновления товара.
    
    Остаток этой командой не меняется, для него есть UpdateStockCommand.
    """
    
    product_id: int = Field(description="ID товара")
    name: str = Field(description="Новое название")
    price: float = Field(description="Новая цена")


class UpdateProductHandler(CommandHandler[ProductDTO]):
    """Обработчик команды обновления товара."""
    
    def __init__(self, repository: ProductRepository):
        self._repository = repository
    
    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        product = await self._repository.find_by_id(command.product_id)
        if product is None:
            raise ProductNotFoundError(command.product_id)
        
        product.update_details(name=command.name, price=command.price)
        await self._repository.update(product)
        
        return ProductDTO.from_entity(product)
