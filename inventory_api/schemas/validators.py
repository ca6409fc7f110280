"""
Field checks shared by the request schemas.

Each helper raises ``PydanticCustomError`` so that a schema collects every
failing field in one pass instead of stopping at the first one.
"""
from typing import Optional
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 2
PASSWORD_MIN_LENGTH = 6
DEFAULT_ROLE = "staff"


def require_text(value: str, label: str) -> str:
    """Strip a string and reject it when nothing is left."""
    value = value.strip()
    if not value:
        raise PydanticCustomError("missing_text", "{label} is required", {"label": label})
    return value


def trimmed_name(value: str) -> str:
    """Strip a name and enforce the minimum length."""
    value = value.strip()
    if len(value) < NAME_MIN_LENGTH:
        raise PydanticCustomError(
            "name_too_short",
            "Name must be at least {min_length} characters",
            {"min_length": NAME_MIN_LENGTH}
        )
    return value


def normalize_email(value: str) -> str:
    """Trim and lower-case an email address."""
    return require_text(value, "Email").lower()


def normalize_role(value: Optional[str]) -> str:
    """Trimmed role, or the default role when absent or blank."""
    if value is None:
        return DEFAULT_ROLE
    return value.strip() or DEFAULT_ROLE


# SQLite INTEGER is a signed 64-bit value
STORE_INT_MIN = -(2 ** 63)
STORE_INT_MAX = 2 ** 63 - 1


def fits_store_integer(value: int) -> bool:
    return STORE_INT_MIN <= value <= STORE_INT_MAX


def scalar_text(value):
    """
    Accept free text as given. Numbers are kept as their text form,
    since the column is text; objects, arrays and booleans are refused.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise PydanticCustomError("text_type", "Input should be text or a number")
