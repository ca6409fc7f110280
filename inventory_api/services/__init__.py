"""Application services."""
from inventory_api.services.auth import AuthService, get_auth_service

__all__ = ["AuthService", "get_auth_service"]
