"""
Product model for inventory management.
"""
from typing import Optional
from datetime import datetime
from sqlalchemy import String, Integer, Float, DateTime, ForeignKey, func, text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.core.database import Base


class Product(Base):
    """Product catalog item."""

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Product identification
    sku: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Not validated on insert; dangling ids are tolerated unless the
    # store enforces foreign keys
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True
    )

    location: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Stock information
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default=text("0"))

    # Status, stored as 0/1
    is_active: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default=text("1"))

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.current_timestamp(),
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, sku={self.sku}, name={self.name}, quantity={self.quantity})>"
