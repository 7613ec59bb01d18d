"""
API схемы для health check.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Ответ health check endpoint.
    
    Пример:
        {
            "status": "healthy",
            "service": "product-service",
            "version": "0.1.0"
        }
    """
    
    status: str = Field(description="Статус сервиса")
    service: str = Field(description="Название сервиса")
    version: str = Field(description="Версия сервиса")
