"""
Product Service - Main application entry point.

FastAPI application exposing CRUD endpoints for catalog products.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_exception_handlers
from app.api.middleware import StructuredLoggingMiddleware
from app.api.v1.routers import health_router, products_router
from app.core.config import logger, settings
from app.infrastructure.persistence import database


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Product Service...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Version: {settings.version}")
    
    try:
        database.init_database(settings.db_url, echo=settings.db_echo)
        await database.init_db()
        logger.info("✓ Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        raise
    
    yield
    
    logger.info("Shutting down Product Service...")
    await database.close_db()


# Create FastAPI application
app = FastAPI(
    title="Product Service",
    description="CRUD API for catalog products (CQRS)",
    version=settings.version,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(StructuredLoggingMiddleware)

# Service errors -> JSON responses
register_exception_handlers(app)

# Include API routers
app.include_router(health_router)
app.include_router(products_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
