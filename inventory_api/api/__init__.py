"""API router."""
from fastapi import APIRouter

from inventory_api.api import auth, categories, products

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(categories.router)
api_router.include_router(products.router)

__all__ = ["api_router"]
