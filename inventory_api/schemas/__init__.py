"""
Pydantic schemas for request/response validation.
"""
from inventory_api.schemas.user import (
    RegisterRequest, LoginRequest, LoginResponse, UserResponse, Identity
)
from inventory_api.schemas.category import CategoryIn, CategoryResponse
from inventory_api.schemas.product import ProductCreate, ProductResponse, ProductListItem

__all__ = [
    # User schemas
    "RegisterRequest", "LoginRequest", "LoginResponse", "UserResponse", "Identity",

    # Category schemas
    "CategoryIn", "CategoryResponse",

    # Product schemas
    "ProductCreate", "ProductResponse", "ProductListItem",
]
