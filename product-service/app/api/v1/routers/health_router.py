"""
Health check роутер.
"""

import logging
from fastapi import APIRouter

from ..schemas.health_schemas import HealthResponse
from ....core.config import settings

logger = logging.getLogger("product-service.api.health")

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.
    
    Returns:
        HealthResponse: Статус сервиса
    """
    logger.debug("Health check called")
    
    return HealthResponse(
        status="healthy",
        service="product-service",
        version=settings.version
    )
