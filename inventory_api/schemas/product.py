"""
Pydantic schemas for Product model.
"""
from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from inventory_api.schemas.validators import (
    STORE_INT_MAX,
    STORE_INT_MIN,
    require_text,
    scalar_text,
    trimmed_name,
)


class ProductCreate(BaseModel):
    """
    Schema for creating a product.

    Field order matters: errors are reported in declaration order, so
    the first entry is sku, then name, quantity, price, category_id.
    """
    sku: str
    name: str
    quantity: Optional[int] = Field(default=0, ge=0, le=STORE_INT_MAX)
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    category_id: Optional[int] = Field(default=None, ge=STORE_INT_MIN, le=STORE_INT_MAX)
    description: Optional[str] = None
    location: Optional[str] = None
    # Any value; only its truthiness is stored
    is_active: Any = True

    @field_validator("sku")
    @classmethod
    def _sku(cls, value: str) -> str:
        return require_text(value, "SKU")

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        return trimmed_name(value)

    @field_validator("quantity")
    @classmethod
    def _quantity(cls, value: Optional[int]) -> int:
        return 0 if value is None else value

    @field_validator("description", "location", mode="before")
    @classmethod
    def _text(cls, value):
        return scalar_text(value)

    def to_row(self) -> dict:
        """Column values for insertion, with the active flag as 0/1 (null keeps the default)."""
        row = self.model_dump()
        row["is_active"] = 1 if self.is_active is None or self.is_active else 0
        return row


class ProductResponse(BaseModel):
    """Schema for product response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    sku: str
    name: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    location: Optional[str] = None
    price: Optional[float] = None
    quantity: int
    is_active: int
    created_at: datetime


class ProductListItem(ProductResponse):
    """Product joined with its category's name."""
    category_name: Optional[str] = None
