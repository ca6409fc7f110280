"""Helpers shared by the repositories."""
from inventory_api.error_handlers import InvalidInputError
from inventory_api.schemas.validators import fits_store_integer


def check_id(value) -> int:
    """Reject anything that is not a plain integer id."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError("id", "Invalid ID")
    return value


def can_exist(row_id: int) -> bool:
    """False for ids outside the store's integer range; no row can carry them."""
    return fits_store_integer(row_id)
