"""
Products API endpoints for inventory management. Every route requires a session.
"""
from fastapi import APIRouter, Depends, status

from inventory_api.core.security import require_session
from inventory_api.repositories.products import ProductRepository, get_product_repository
from inventory_api.schemas.product import ProductCreate, ProductListItem, ProductResponse

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    dependencies=[Depends(require_session)]
)


@router.get("", response_model=list[ProductListItem])
async def list_products(repo: ProductRepository = Depends(get_product_repository)):
    """List products with their category name, newest first."""
    return repo.list()


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    repo: ProductRepository = Depends(get_product_repository)
):
    """
    Create a new product.

    - **sku**: Required
    - **name**: At least 2 characters after trimming
    - **quantity**: Non-negative integer, defaults to 0
    - **price**: Optional finite number
    - **category_id**: Optional category reference (not checked)
    - **is_active**: Defaults to true, stored as 1/0
    """
    return repo.create(product_data)
