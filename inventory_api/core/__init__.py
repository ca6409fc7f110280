"""Core application modules."""
from inventory_api.core.config import Settings, get_settings
from inventory_api.core.database import Base, Store, get_db, get_store
from inventory_api.core.security import (
    get_password_hash,
    verify_password,
    build_password_context,
    create_session_token,
    decode_session_token,
    AccessGate,
    require_session
)

__all__ = [
    "Settings",
    "get_settings",
    "Base",
    "Store",
    "get_db",
    "get_store",
    "get_password_hash",
    "verify_password",
    "build_password_context",
    "create_session_token",
    "decode_session_token",
    "AccessGate",
    "require_session",
]
