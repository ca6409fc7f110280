"""
Category repository: create, read, rename and delete categories.
"""
from fastapi import Depends
from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from inventory_api.core.database import get_db
from inventory_api.error_handlers import ResourceNotFoundError
from inventory_api.logging_config import get_logger
from inventory_api.models.category import Category
from inventory_api.repositories.base import can_exist, check_id
from inventory_api.schemas.category import CategoryIn, CategoryResponse

logger = get_logger("categories")


class CategoryRepository:
    """CRUD over the ``categories`` table. Every mutation commits on its own."""

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[Category]:
        return list(self.db.execute(select(Category).order_by(Category.id)).scalars().all())

    def create(self, data: CategoryIn) -> CategoryResponse:
        category = Category(name=data.name)
        self.db.add(category)
        self.db.commit()
        logger.info(f"Created category id={category.id}")
        return CategoryResponse(id=category.id, name=data.name)

    def get(self, category_id: int) -> Category:
        check_id(category_id)
        if not can_exist(category_id):
            raise ResourceNotFoundError("Category", category_id)
        category = self.db.get(Category, category_id)
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return category

    def update(self, category_id: int, data: CategoryIn) -> CategoryResponse:
        check_id(category_id)
        if not can_exist(category_id):
            raise ResourceNotFoundError("Category", category_id)
        result = self.db.execute(
            update(Category).where(Category.id == category_id).values(name=data.name)
        )
        self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Category", category_id)
        logger.info(f"Renamed category id={category_id}")
        return CategoryResponse(id=category_id, name=data.name)

    def delete(self, category_id: int) -> None:
        check_id(category_id)
        if not can_exist(category_id):
            raise ResourceNotFoundError("Category", category_id)
        result = self.db.execute(delete(Category).where(Category.id == category_id))
        self.db.commit()
        if result.rowcount == 0:
            raise ResourceNotFoundError("Category", category_id)
        logger.info(f"Deleted category id={category_id}")


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)
