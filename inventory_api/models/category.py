"""
Category model for grouping products.
"""
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from inventory_api.core.database import Base


class Category(Base):
    """Named product grouping. Names are not unique."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
