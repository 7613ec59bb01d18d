"""
Unit тесты для преобразования исключений в HTTP статусы.
"""

import pytest

from app.api.error_handlers import status_for
from app.core.errors import (
    DomainError,
    DatabaseError,
    HandlerNotRegisteredError,
    InvalidProductError,
    InvalidStockError,
    ProductNotFoundError,
)


@pytest.mark.parametrize(
    "error, expected",
    [
        (ProductNotFoundError(1), 404),
        (InvalidStockError(stock=-1), 400),
        (InvalidProductError(fields=["price"]), 400),
        (DomainError("rule violated"), 400),
        (HandlerNotRegisteredError("GetProductQuery"), 500),
        (DatabaseError(operation="get_db", reason="down"), 500),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


def test_to_dict_shape():
    error = InvalidStockError(stock=-3, product_id=7)
    
    assert error.to_dict() == {
        "detail": error.message,
        "error_code": "INVALID_STOCK",
        "details": {"stock": -3, "product_id": 7},
    }


def test_default_error_code_per_layer():
    assert DomainError("x").error_code == "DOMAIN_ERROR"
    assert str(ProductNotFoundError(5)) == "Товар '5' не найден [product_id=5]"
