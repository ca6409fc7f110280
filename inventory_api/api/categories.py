"""
Category API endpoints. Every route requires a session.
"""
from fastapi import APIRouter, Depends, Response, status

from inventory_api.core.security import require_session
from inventory_api.repositories.categories import CategoryRepository, get_category_repository
from inventory_api.schemas.category import CategoryIn, CategoryResponse

router = APIRouter(
    prefix="/categories",
    tags=["Categories"],
    dependencies=[Depends(require_session)]
)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(repo: CategoryRepository = Depends(get_category_repository)):
    """List all categories."""
    return repo.list()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryIn,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """
    Create a category.

    - **name**: At least 2 characters after trimming
    """
    return repo.create(category_data)


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Get a specific category by ID."""
    return repo.get(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    category_data: CategoryIn,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Rename a category."""
    return repo.update(category_id, category_data)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository)
):
    """Delete a category."""
    repo.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
