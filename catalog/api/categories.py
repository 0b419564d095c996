"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from catalog.api.dependencies import (
    HardDeleteQuery,
    RecordIdPath,
    get_category_service,
    get_pagination,
)
from catalog.schemas.category import (
    CategoryCreate,
    CategoryDeletedResponse,
    CategoryResponse,
    CategoryUpdate,
)
from catalog.schemas.common import Paginated, PaginationQuery
from catalog.services.category_service import CategoryService

router = APIRouter(tags=["categories"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Validation error"},
    status.HTTP_404_NOT_FOUND: {"description": "Category not found"},
}


@router.get("/categories", response_model=Paginated[CategoryResponse])
def get_categories(
    params: Annotated[PaginationQuery, Depends(get_pagination)],
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get live categories, newest first, with pagination and optional search."""
    categories, pagination = service.find_all(params)
    return Paginated[CategoryResponse](
        data=[CategoryResponse.model_validate(c) for c in categories],
        pagination=pagination,
    )


@router.get("/category/{category_id}", response_model=CategoryResponse, responses=ERROR_RESPONSES)
def get_category(
    category_id: RecordIdPath,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Get a single category by id."""
    return service.find_by_id(category_id)


@router.post(
    "/category",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Validation error"},
        status.HTTP_409_CONFLICT: {"description": "Category name already exists"},
    },
)
def create_category(
    category_data: CategoryCreate,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Create a new category."""
    return service.create(category_data)


@router.put(
    "/category/{category_id}",
    response_model=CategoryResponse,
    responses={
        **ERROR_RESPONSES,
        status.HTTP_409_CONFLICT: {"description": "Category name already exists"},
    },
)
def update_category(
    category_id: RecordIdPath,
    category_data: CategoryUpdate,
    service: Annotated[CategoryService, Depends(get_category_service)],
):
    """Update a category. Only the supplied fields change."""
    return service.update(category_id, category_data)


@router.delete(
    "/category/{category_id}",
    response_model=CategoryDeletedResponse,
    responses=ERROR_RESPONSES,
)
def delete_category(
    category_id: RecordIdPath,
    service: Annotated[CategoryService, Depends(get_category_service)],
    hard: HardDeleteQuery = False,
):
    """Delete a category. Soft by default; ``hard=true`` removes it permanently.

    Products referencing the category are left untouched.
    """
    category = service.hard_delete(category_id) if hard else service.soft_delete(category_id)
    return CategoryDeletedResponse(
        message="Category deleted successfully",
        category=CategoryResponse.model_validate(category),
    )
