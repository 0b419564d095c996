"""Category schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog.schemas.common import CamelModel, DeletedResponse, WriteModel


class CategoryCreate(WriteModel):
    """Create a new category."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=2000)


class CategoryUpdate(WriteModel):
    """Update a category. Only supplied fields change."""

    non_nullable: ClassVar[tuple[str, ...]] = ("name", "description")

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)


class CategoryResponse(CamelModel):
    """Category response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str = Field(serialization_alias="_id")
    name: str
    description: str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime


class CategoryDeletedResponse(DeletedResponse):
    category: CategoryResponse
