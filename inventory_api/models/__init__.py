"""
SQLAlchemy models for the inventory application.
Import all models here to ensure they're registered with SQLAlchemy.
"""
from inventory_api.models.user import User
from inventory_api.models.category import Category
from inventory_api.models.product import Product

__all__ = [
    "User",
    "Category",
    "Product",
]
