"""Shared schemas: identifiers, pagination and write-payload base classes."""

from typing import Annotated, ClassVar, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    StringConstraints,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

ID_PATTERN = r"^[0-9a-f]{32}$"
DEFAULT_MAX_LIMIT = 100
# Keeps the row offset within a 64-bit database integer
MAX_PAGE = 1_000_000_000

RecordId = Annotated[str, StringConstraints(pattern=ID_PATTERN)]

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WriteModel(CamelModel):
    """Base for create/update payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # Fields that may be omitted but never sent as null
    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


class PaginationQuery(BaseModel):
    """Page window and search term for list endpoints.

    Out-of-range values are clamped rather than rejected: ``page`` into
    ``[1, MAX_PAGE]`` and ``limit`` into ``[1, max_limit]``, where
    ``max_limit`` comes from the validation context. Blank search terms count
    as no search.
    """

    page: int = 1
    limit: int = 10
    search: str | None = None

    @field_validator("page")
    @classmethod
    def clamp_page(cls, value: int) -> int:
        return min(MAX_PAGE, max(1, value))

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, value: int, info: ValidationInfo) -> int:
        max_limit = (info.context or {}).get("max_limit", DEFAULT_MAX_LIMIT)
        return min(max_limit, max(1, value))

    @field_validator("search")
    @classmethod
    def blank_search_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(CamelModel):
    """Pagination summary returned with every list response."""

    page: int
    page_size: int
    total_page: int
    total_count: int


class Paginated(CamelModel, Generic[T]):
    """A page of records plus its pagination summary."""

    data: list[T]
    pagination: Pagination


class DeletedResponse(BaseModel):
    """Body returned by delete endpoints."""

    message: str
