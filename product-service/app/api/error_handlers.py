"""
Преобразование исключений сервиса в HTTP ответы.

Роутеры не перехватывают доменные ошибки сами: любая
ProductServiceError доходит до обработчиков ниже, которые
выбирают статус по типу ошибки и отдают ``error.to_dict()``.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import (
    ProductServiceError,
    DomainError,
    ProductNotFoundError,
    InvalidStockError,
    InvalidProductError,
)

logger = logging.getLogger("product-service.api.errors")

# Более специфичные классы должны идти раньше базовых
DOMAIN_STATUS_CODES: Dict[Type[DomainError], int] = {
    ProductNotFoundError: 404,
    InvalidStockError: 400,
    InvalidProductError: 400,
}


def status_for(error: ProductServiceError) -> int:
    """HTTP статус для исключения сервиса."""
    for error_type, status_code in DOMAIN_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    if isinstance(error, DomainError):
        return 400
    return 500


async def handle_service_error(request: Request, exc: ProductServiceError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            exc_info=exc,
        )
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Подключить обработчики исключений к приложению."""
    app.add_exception_handler(ProductServiceError, handle_service_error)
