"""Product API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from catalog.api.dependencies import (
    HardDeleteQuery,
    RecordIdPath,
    get_pagination,
    get_product_service,
)
from catalog.schemas.common import ID_PATTERN, Paginated, PaginationQuery
from catalog.schemas.product import (
    ProductCreate,
    ProductDeletedResponse,
    ProductResponse,
    ProductUpdate,
)
from catalog.services.product_service import ProductService

router = APIRouter(tags=["products"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Validation error"},
    status.HTTP_404_NOT_FOUND: {"description": "Product not found"},
}


@router.get("/products", response_model=Paginated[ProductResponse])
def get_products(
    params: Annotated[PaginationQuery, Depends(get_pagination)],
    service: Annotated[ProductService, Depends(get_product_service)],
    category_id: Annotated[
        str | None,
        Query(alias="categoryId", pattern=ID_PATTERN, description="Only products in this category"),
    ] = None,
):
    """Get live products, newest first, with their categories expanded."""
    products, pagination = service.find_all(params, category_id=category_id)
    return Paginated[ProductResponse](
        data=[ProductResponse.from_product(p) for p in products],
        pagination=pagination,
    )


@router.get("/product/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
def get_product(
    product_id: RecordIdPath,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Get a single product by id."""
    return ProductResponse.from_product(service.find_by_id(product_id))


@router.post(
    "/product",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Validation error"}},
)
def create_product(
    product_data: ProductCreate,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Create a new product in an existing category."""
    return ProductResponse.from_product(service.create(product_data))


@router.put("/product/{product_id}", response_model=ProductResponse, responses=ERROR_RESPONSES)
def update_product(
    product_id: RecordIdPath,
    product_data: ProductUpdate,
    service: Annotated[ProductService, Depends(get_product_service)],
):
    """Update a product. Only the supplied fields change."""
    return ProductResponse.from_product(service.update(product_id, product_data))


@router.delete(
    "/product/{product_id}",
    response_model=ProductDeletedResponse,
    responses=ERROR_RESPONSES,
)
def delete_product(
    product_id: RecordIdPath,
    service: Annotated[ProductService, Depends(get_product_service)],
    hard: HardDeleteQuery = False,
):
    """Delete a product. Soft by default; ``hard=true`` removes it permanently."""
    product = service.hard_delete(product_id) if hard else service.soft_delete(product_id)
    return ProductDeletedResponse(
        message="Product deleted successfully",
        product=ProductResponse.from_product(product),
    )
