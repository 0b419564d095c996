"""Listing helpers shared by the resource services.

Every list endpoint goes through the same three steps: exclude soft-deleted
rows, optionally narrow by a case-insensitive substring match on name or
description, and cut a newest-first page out of the result.
"""

import math
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Query

from catalog.schemas.common import Pagination, PaginationQuery

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape SQL LIKE wildcards so user input matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def live_records(query: Query, model: Any) -> Query:
    """Restrict a query to records that are not soft-deleted."""
    return query.filter(model.is_deleted.is_(False))


def apply_search(query: Query, model: Any, search: str | None) -> Query:
    """Match ``search`` as a literal substring of name or description."""
    if not search:
        return query
    pattern = f"%{escape_like(search)}%"
    return query.filter(
        or_(
            model.name.ilike(pattern, escape=LIKE_ESCAPE),
            model.description.ilike(pattern, escape=LIKE_ESCAPE),
        )
    )


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit) if total_count else 0


def paginate(query: Query, model: Any, params: PaginationQuery) -> tuple[list[Any], Pagination]:
    """Return one newest-first page of ``query`` and its pagination summary."""
    total_count = query.order_by(None).count()
    items = (
        query.order_by(model.created_at.desc(), model.id.desc())
        .offset(params.skip)
        .limit(params.limit)
        .all()
    )
    pagination = Pagination(
        page=params.page,
        page_size=params.limit,
        total_page=total_pages(total_count, params.limit),
        total_count=total_count,
    )
    return items, pagination
