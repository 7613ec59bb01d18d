"""
Database configuration for product service.

Provides:
- Database initialization (init_database, init_db, close_db)
- Async session management (get_db)
"""
import logging
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from ...core.errors import DatabaseError
from .models import Base

logger = logging.getLogger("product-service.infrastructure.persistence.database")

# ==================== Database Configuration ====================

db_url = None
async_db_url = None
engine = None
async_session_maker = None


def to_async_url(database_url: str) -> str:
    """
    Convert a sync SQLAlchemy URL to its async driver variant.
    
    sqlite:/// -> sqlite+aiosqlite:///, postgresql:// -> postgresql+asyncpg://.
    URLs that already name a driver are returned unchanged.
    """
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def init_database(database_url: str, echo: bool = False):
    """
    Initialize database engine and session maker.
    
    Args:
        database_url: SQLAlchemy database URL
        echo: Log SQL statements
    """
    global db_url, async_db_url, engine, async_session_maker
    
    db_url = database_url
    async_db_url = to_async_url(database_url)
    
    # Ensure data directory exists for SQLite files
    if db_url.startswith("sqlite:///") and ":memory:" not in db_url:
        db_path = db_url.replace("sqlite:///", "", 1)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    
    engine = create_async_engine(
        async_db_url,
        echo=echo,
        pool_pre_ping=True,
    )
    
    if "sqlite" in async_db_url:
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Set SQLite pragmas for better performance"""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds
            cursor.close()
        
        logger.info("SQLite WAL mode and pragmas configured")
    
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    
    logger.info(f"Database initialized with URL: {db_url}")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting async database session.
    
    Commits when the request handler completes, rolls back on error.
    
    Yields:
        AsyncSession: Database session
    """
    if async_session_maker is None:
        raise DatabaseError(
            operation="get_db",
            reason="Database not initialized. Call init_database() first."
        )
    
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.debug(f"Rolling back transaction: {e}")
            await session.rollback()
            raise


async def init_db():
    """Initialize database (create tables)"""
    if engine is None:
        raise DatabaseError(
            operation="init_db",
            reason="Database not initialized. Call init_database() first."
        )
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database schema initialized")


async def close_db():
    """Close database connections"""
    global engine, async_session_maker
    
    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")
    engine = None
    async_session_maker = None
