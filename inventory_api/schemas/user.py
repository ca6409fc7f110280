"""
Pydantic schemas for registration, login and session identity.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError

from inventory_api.schemas.validators import (
    DEFAULT_ROLE,
    PASSWORD_MIN_LENGTH,
    normalize_email,
    normalize_role,
)


class RegisterRequest(BaseModel):
    """Schema for user registration."""
    email: str
    password: str
    role: Optional[str] = DEFAULT_ROLE

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def _password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("missing_text", "Password is required")
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters",
                {"min_length": PASSWORD_MIN_LENGTH}
            )
        if "\x00" in value:
            raise PydanticCustomError("password_nul_byte", "Password must not contain NUL characters")
        return value

    @field_validator("role")
    @classmethod
    def _role(cls, value: Optional[str]) -> str:
        return normalize_role(value)


class LoginRequest(BaseModel):
    """Schema for login request."""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _email(cls, value: str) -> str:
        return normalize_email(value)

    @field_validator("password")
    @classmethod
    def _password(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("missing_text", "Password is required")
        return value


class UserResponse(BaseModel):
    """Identity summary returned by registration. Never carries the hash."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: str


class Identity(BaseModel):
    """Decoded session identity."""
    id: int
    email: str
    role: str


class LoginResponse(BaseModel):
    """Schema for login response."""
    token: str
