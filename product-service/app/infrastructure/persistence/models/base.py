"""
Base declarative class for SQLAlchemy models.

All models should inherit from this Base.
"""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models"""

    pass
