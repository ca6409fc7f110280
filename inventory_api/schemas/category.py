"""
Pydantic schemas for Category model.
"""
from pydantic import BaseModel, ConfigDict, field_validator

from inventory_api.schemas.validators import trimmed_name


class CategoryIn(BaseModel):
    """Schema for creating or renaming a category."""
    name: str

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        return trimmed_name(value)


class CategoryResponse(BaseModel):
    """Schema for category response."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
