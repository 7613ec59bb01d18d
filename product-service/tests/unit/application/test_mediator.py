"""
Unit тесты для Mediator.
"""

import pytest
from unittest.mock import AsyncMock

from app.application.mediator import Mediator
from app.application.commands import CreateProductCommand, DeleteProductCommand
from app.application.queries import GetProductQuery
from app.core.dependencies import build_mediator
from app.core.errors import HandlerNotRegisteredError


def make_handler(result):
    handler = AsyncMock()
    handler.handle.return_value = result
    return handler


@pytest.mark.asyncio
async def test_send_routes_by_message_type():
    """Каждый тип сообщения попадает в свой обработчик"""
    create_handler = make_handler(1)
    get_handler = make_handler("dto")
    mediator = (
        Mediator()
        .register(CreateProductCommand, create_handler)
        .register(GetProductQuery, get_handler)
    )
    
    command = CreateProductCommand(name="Keyboard", price=1.0, stock=1)
    assert await mediator.send(command) == 1
    assert await mediator.send(GetProductQuery(product_id=1)) == "dto"
    
    create_handler.handle.assert_awaited_once_with(command)
    get_handler.handle.assert_awaited_once()


@pytest.mark.asyncio
async def test_unregistered_message_raises():
    mediator = Mediator()
    
    with pytest.raises(HandlerNotRegisteredError) as exc_info:
        await mediator.send(DeleteProductCommand(product_id=1))
    
    assert exc_info.value.details["message_type"] == "DeleteProductCommand"


@pytest.mark.asyncio
async def test_register_replaces_handler():
    old_handler = make_handler("old")
    new_handler = make_handler("new")
    mediator = Mediator()
    mediator.register(GetProductQuery, old_handler)
    mediator.register(GetProductQuery, new_handler)
    
    assert await mediator.send(GetProductQuery(product_id=1)) == "new"
    old_handler.handle.assert_not_called()


def test_build_mediator_registers_all_handlers():
    """DI провайдер регистрирует обработчики для всех команд и запросов"""
    from app.application.commands import UpdateStockCommand, UpdateProductCommand
    from app.application.queries import ListProductsQuery
    
    mediator = build_mediator(AsyncMock())
    
    for message_type in (
        CreateProductCommand,
        UpdateStockCommand,
        UpdateProductCommand,
        DeleteProductCommand,
        GetProductQuery,
        ListProductsQuery,
    ):
        assert mediator.is_registered(message_type)
