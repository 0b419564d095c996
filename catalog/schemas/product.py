"""Product schemas."""

from datetime import datetime
from typing import ClassVar

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog.models.product import Product
from catalog.schemas.common import CamelModel, DeletedResponse, RecordId, WriteModel


class ProductCreate(WriteModel):
    """Create a new product."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="", max_length=2000)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity: int = Field(default=0, ge=0)
    category_id: RecordId


class ProductUpdate(WriteModel):
    """Update a product. Only supplied fields change."""

    non_nullable: ClassVar[tuple[str, ...]] = (
        "name",
        "description",
        "price",
        "quantity",
        "category_id",
    )

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: float | None = Field(None, ge=0, allow_inf_nan=False)
    quantity: int | None = Field(None, ge=0)
    category_id: RecordId | None = None


class CategorySummary(CamelModel):
    """Category details embedded in a product response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str = Field(serialization_alias="_id")
    name: str
    description: str


class ProductResponse(CamelModel):
    """Product response with its category expanded when it still exists."""

    id: str = Field(serialization_alias="_id")
    name: str
    description: str
    price: float
    quantity: int
    category_id: CategorySummary | str
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Build a response, joining in the referenced category."""
        category = product.category
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            category_id=(
                CategorySummary.model_validate(category)
                if category is not None
                else product.category_id
            ),
            is_deleted=product.is_deleted,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductDeletedResponse(DeletedResponse):
    product: ProductResponse
