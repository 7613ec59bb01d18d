"""
Mediator - внутрипроцессный диспетчер команд и запросов.

Роутер не знает о конкретных обработчиках: он создает команду или
запрос и передает его в Mediator, который находит единственный
зарегистрированный обработчик по типу сообщения.
"""

import logging
from typing import Any, Dict, Type, Union

from .commands.base import Command, CommandHandler
from .queries.base import Query, QueryHandler
from ..core.errors import HandlerNotRegisteredError

logger = logging.getLogger("product-service.application.mediator")

Message = Union[Command, Query]
Handler = Union[CommandHandler, QueryHandler]


class Mediator:
    """
    Диспетчер команд и запросов.
    
    Каждому типу сообщения соответствует ровно один обработчик.
    Повторная регистрация того же типа заменяет обработчик.
    
    Пример:
        >>> mediator = Mediator()
        >>> mediator.register(GetProductQuery, GetProductHandler(repository))
        >>> dto = await mediator.send(GetProductQuery(product_id=1))
    """
    
    def __init__(self):
        self._handlers: Dict[Type[Message], Handler] = {}
    
    def register(self, message_type: Type[Message], handler: Handler) -> "Mediator":
        """
        Зарегистрировать обработчик для типа команды/запроса.
        
        Args:
            message_type: Класс команды или запроса
            handler: Обработчик
            
        Returns:
            Self для цепочки вызовов
        """
        if message_type in self._handlers:
            logger.debug(f"Replacing handler for {message_type.__name__}")
        self._handlers[message_type] = handler
        return self
    
    def is_registered(self, message_type: Type[Message]) -> bool:
        return message_type in self._handlers
    
    async def send(self, message: Message) -> Any:
        """
        Передать команду или запрос обработчику.
        
        Args:
            message: Команда или запрос
            
        Returns:
            Результат обработчика
            
        Raises:
            HandlerNotRegisteredError: Если для типа сообщения нет обработчика
        """
        message_type = type(message)
        handler = self._handlers.get(message_type)
        if handler is None:
            raise HandlerNotRegisteredError(message_type.__name__)
        
        logger.debug(f"Dispatching {message_type.__name__} to {type(handler).__name__}")
        return await handler.handle(message)
