"""Exception handlers that turn failures into JSON error bodies."""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.exceptions import CatalogError, InvalidReferenceError

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Validation error"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_validation_errors(errors: Sequence[Any]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into field-level issues.

    ``loc`` looks like ``("body", "price")`` or ``("query", "page")``; the
    first element becomes the location and the rest the dotted field path.
    """
    issues = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else ""
        issues.append(
            {
                "field": ".".join(loc[1:]),
                "location": location,
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )
    return issues


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": VALIDATION_MESSAGE, "errors": format_validation_errors(exc.errors())},
    )


async def catalog_exception_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Map service-layer errors to their status codes."""
    if isinstance(exc, InvalidReferenceError):
        content = {
            "message": VALIDATION_MESSAGE,
            "errors": [
                {
                    "field": exc.field,
                    "location": "body",
                    "message": exc.message,
                    "type": "invalid_reference",
                }
            ],
        }
    else:
        content = {"message": exc.message}
    return JSONResponse(status_code=exc.status_code, content=content)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with a generic body."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(CatalogError, catalog_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
