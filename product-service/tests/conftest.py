"""
Pytest configuration and fixtures.
"""
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from app.core.config import settings
from app.infrastructure.persistence.models import Base


@pytest_asyncio.fixture
async def db_session():
    """
    Фикстура для создания in-memory БД для тестов.
    
    Создает временную БД SQLite в памяти для каждого теста.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False
    )
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    
    async with async_session_maker() as session:
        yield session
        await session.rollback()
    
    await engine.dispose()


@pytest.fixture
def client(tmp_path, monkeypatch):
    """
    Test client fixture.
    
    Lifespan приложения инициализирует БД во временном файле,
    поэтому каждый тест работает с пустым каталогом.
    """
    monkeypatch.setattr(settings, "db_url", f"sqlite:///{tmp_path}/products.db")
    
    from app.main import app
    
    with TestClient(app) as test_client:
        yield test_client
