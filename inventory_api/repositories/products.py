"""
Product repository: list and create products.
"""
from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from inventory_api.core.database import get_db
from inventory_api.logging_config import get_logger
from inventory_api.models.category import Category
from inventory_api.models.product import Product
from inventory_api.schemas.product import ProductCreate, ProductListItem, ProductResponse

logger = get_logger("products")


class ProductRepository:
    """
    Access to the ``products`` table.

    ``category_id`` is stored as given. Whether it points at an existing
    category is left to the store's foreign-key enforcement.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[ProductListItem]:
        """All products with their category name, newest first."""
        stmt = (
            select(Product, Category.name.label("category_name"))
            .outerjoin(Category, Product.category_id == Category.id)
            .order_by(Product.id.desc())
        )
        items = []
        for product, category_name in self.db.execute(stmt).all():
            item = ProductListItem.model_validate(product)
            item.category_name = category_name
            items.append(item)
        return items

    def create(self, data: ProductCreate) -> ProductResponse:
        """Insert a product and return the stored row, store defaults included."""
        product = Product(**data.to_row())
        self.db.add(product)
        self.db.commit()

        # Re-read so server defaults such as created_at are reflected
        self.db.refresh(product)
        logger.info(f"Created product id={product.id} sku={product.sku}")
        return ProductResponse.model_validate(product)


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return ProductRepository(db)
