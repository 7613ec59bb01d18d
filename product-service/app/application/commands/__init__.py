"""
Commands (Команды).

Команды представляют намерение изменить состояние системы.
Следуют паттерну CQRS (Command Query Responsibility Segregation).
"""

from .base import Command, CommandHandler
from .create_product import CreateProductCommand, CreateProductHandler
from .update_stock import UpdateStockCommand, UpdateStockHandler
from .update_product import UpdateProductCommand, UpdateProductHandler
from .delete_product import DeleteProductCommand, DeleteProductHandler

__all__ = [
    "Command",
    "CommandHandler",
    "CreateProductCommand",
    "CreateProductHandler",
    "UpdateStockCommand",
    "UpdateStockHandler",
    "UpdateProductCommand",
    "UpdateProductHandler",
    "DeleteProductCommand",
    "DeleteProductHandler",
]
