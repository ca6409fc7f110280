"""Data access for catalog resources."""
from inventory_api.repositories.categories import CategoryRepository, get_category_repository
from inventory_api.repositories.products import ProductRepository, get_product_repository

__all__ = [
    "CategoryRepository",
    "get_category_repository",
    "ProductRepository",
    "get_product_repository",
]
