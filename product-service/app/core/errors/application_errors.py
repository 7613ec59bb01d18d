"""
Исключения прикладного слоя.
"""

from typing import Optional, Dict, Any
from .base import ApplicationError


class HandlerNotRegisteredError(ApplicationError):
    """
    Исключение: для команды или запроса не зарегистрирован обработчик.
    
    Пример:
        >>> raise HandlerNotRegisteredError("CreateProductCommand")
    """
    
    def __init__(self, message_type: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            message_type: Имя класса команды/запроса
            details: Дополнительные детали
        """
        super().__init__(
            message=f"Обработчик для '{message_type}' не зарегистрирован",
            details={"message_type": message_type, **(details or {})},
            error_code="HANDLER_NOT_REGISTERED"
        )
