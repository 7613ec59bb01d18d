"""
Иерархия исключений Product Service.

Каждый слой бросает исключения своего базового класса:
    ProductServiceError
    ├── DomainError          - нарушение инвариантов товара
    ├── ApplicationError     - ошибки диспетчеризации команд/запросов
    └── InfrastructureError  - ошибки БД и репозиториев

API слой превращает их в HTTP ответы через ``to_dict()``
(см. app.api.error_handlers).
"""

from typing import Any, ClassVar, Dict, Optional


class ProductServiceError(Exception):
    """
    Базовое исключение сервиса.
    
    Атрибуты:
        message: Человекочитаемое сообщение
        details: Контекст ошибки (ID товара, отклоненное значение и т.п.)
        error_code: Стабильный код для клиентов API
    """
    
    code: ClassVar[str] = "PRODUCT_SERVICE_ERROR"
    
    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})
        self.error_code = error_code or self.code
    
    def to_dict(self) -> Dict[str, Any]:
        """Тело ответа API для этой ошибки."""
        return {
            "detail": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }
    
    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"


class DomainError(ProductServiceError):
    """Нарушение бизнес-правила товара."""
    
    code = "DOMAIN_ERROR"


class ApplicationError(ProductServiceError):
    """Ошибка прикладного слоя: команды, запросы, Mediator."""
    
    code = "APPLICATION_ERROR"


class InfrastructureError(ProductServiceError):
    """Ошибка хранилища или другой внешней системы."""
    
    code = "INFRASTRUCTURE_ERROR"
