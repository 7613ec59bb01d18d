"""
Доменные исключения.

Исключения для ошибок бизнес-логики и нарушения бизнес-правил.
"""

from typing import Any, Dict, List, Optional
from .base import DomainError


class ProductNotFoundError(DomainError):
    """
    Исключение: товар не найден.
    
    Пример:
        >>> raise ProductNotFoundError(42)
    """
    
    def __init__(self, product_id: int, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            product_id: ID несуществующего товара
            details: Дополнительные детали
        """
        message = f"Товар '{product_id}' не найден"
        super().__init__(
            message=message,
            details={"product_id": product_id, **(details or {})},
            error_code="PRODUCT_NOT_FOUND"
        )
        self.product_id = product_id


class InvalidStockError(DomainError):
    """
    Исключение: недопустимое значение остатка.
    
    Выбрасывается при попытке установить отрицательный остаток товара.
    
    Пример:
        >>> raise InvalidStockError(stock=-5)
    """
    
    def __init__(
        self,
        stock: int,
        product_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            stock: Отклоненное значение остатка
            product_id: ID товара (None для еще не созданного товара)
            details: Дополнительные детали
        """
        message = f"Остаток не может быть отрицательным: {stock}"
        super().__init__(
            message=message,
            details={
                "stock": stock,
                "product_id": product_id,
                **(details or {})
            },
            error_code="INVALID_STOCK"
        )
        self.stock = stock


class InvalidProductError(DomainError):
    """
    Исключение: недопустимые название или цена товара.
    
    Пример:
        >>> raise InvalidProductError(product_id=3, fields=["price"])
    """
    
    def __init__(
        self,
        fields: List[str],
        product_id: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Args:
            fields: Поля, не прошедшие валидацию
            product_id: ID товара
            details: Дополнительные детали
        """
        super().__init__(
            message=f"Недопустимые значения полей товара: {', '.join(fields)}",
            details={
                "fields": fields,
                "product_id": product_id,
                **(details or {})
            },
            error_code="INVALID_PRODUCT"
        )
