"""FastAPI dependencies for request parsing and services."""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.orm import Session

from catalog.config import get_settings
from catalog.database import get_db
from catalog.schemas.common import ID_PATTERN, PaginationQuery
from catalog.services.category_service import CategoryService
from catalog.services.product_service import ProductService

RecordIdPath = Annotated[
    str,
    Path(pattern=ID_PATTERN, description="Record identifier (32 lowercase hex chars)"),
]

HardDeleteQuery = Annotated[
    bool,
    Query(description="Set to true for permanent deletion"),
]


def get_pagination(
    page: Annotated[int, Query(description="Page number, starting at 1")] = 1,
    limit: Annotated[int | None, Query(description="Page size, at most 100")] = None,
    search: Annotated[
        str | None,
        Query(description="Case-insensitive text matched against name and description"),
    ] = None,
) -> PaginationQuery:
    """Parse the pagination query, clamping page and limit into range."""
    settings = get_settings()
    return PaginationQuery.model_validate(
        {
            "page": page,
            "limit": limit if limit is not None else settings.default_page_size,
            "search": search,
        },
        context={"max_limit": settings.max_page_size},
    )


def get_category_service(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryService:
    """Get category service bound to the request's session."""
    return CategoryService(db)


def get_product_service(
    db: Annotated[Session, Depends(get_db)],
) -> ProductService:
    """Get product service bound to the request's session."""
    return ProductService(db)
