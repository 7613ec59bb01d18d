"""
Инфраструктурные исключения.

Исключения для ошибок работы с базой данных.
"""

from typing import Optional, Dict, Any
from .base import InfrastructureError


class RepositoryError(InfrastructureError):
    """
    Исключение: ошибка работы с репозиторием.
    
    Пример:
        >>> raise RepositoryError(
        ...     operation="add",
        ...     entity_type="Product",
        ...     reason="Database connection failed"
        ... )
    """
    
    def __init__(
        self,
        operation: str,
        entity_type: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция (add, update, remove и т.д.)
            entity_type: Тип сущности
            reason: Причина ошибки
            details: Дополнительные детали
        """
        message = (
            f"Ошибка репозитория при операции '{operation}' "
            f"с {entity_type}: {reason}"
        )
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "entity_type": entity_type,
                "reason": reason,
                **(details or {})
            },
            error_code="REPOSITORY_ERROR"
        )


class DatabaseError(InfrastructureError):
    """
    Исключение: ошибка работы с базой данных.
    
    Выбрасывается, если БД не инициализирована или недоступна.
    """
    
    def __init__(
        self,
        operation: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            operation: Операция БД
            reason: Причина ошибки
            details: Дополнительные детали
        """
        super().__init__(
            message=f"Ошибка БД при операции '{operation}': {reason}",
            details={
                "operation": operation,
                "reason": reason,
                **(details or {})
            },
            error_code="DATABASE_ERROR"
        )
