"""
SQLAlchemy model for product persistence.
"""
from datetime import datetime, timezone
from sqlalchemy import String, Integer, BigInteger, Numeric, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ProductModel(Base):
    """SQLAlchemy model for catalog products"""
    __tablename__ = "products"
    
    # Primary key (generated by the database)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=False)
    stock: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    
    __table_args__ = (
        CheckConstraint("stock >= 0", name="non_negative_stock"),
        CheckConstraint("price >= 0", name="non_negative_price"),
    )
