"""
Команда удаления товара.
"""

from pydantic import Field

from .base import Command, CommandHandler
from ...domain.product_context.repositories import ProductRepository


class DeleteProductCommand(Command):
    """Команда удаления товара по ID."""
    
    product_id: int = Field(description="ID товара")


class DeleteProductHandler(CommandHandler[None]):
    """
    Обработчик команды удаления товара.
    
    Raises:
        ProductNotFoundError: Если товар не найден (пробрасывается из репозитория)
    """
    
    def __init__(self, repository: ProductRepository):
        self._repository = repository
    
    async def handle(self, command: DeleteProductCommand) -> None:
        await self._repository.remove(command.product_id)
