"""Pydantic schemas for API requests and responses."""

from catalog.schemas.category import (
    CategoryCreate,
    CategoryDeletedResponse,
    CategoryResponse,
    CategoryUpdate,
)
from catalog.schemas.common import Paginated, Pagination, PaginationQuery
from catalog.schemas.product import (
    CategorySummary,
    ProductCreate,
    ProductDeletedResponse,
    ProductResponse,
    ProductUpdate,
)

__all__ = [
    "PaginationQuery",
    "Pagination",
    "Paginated",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "CategoryDeletedResponse",
    "CategorySummary",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductDeletedResponse",
]
