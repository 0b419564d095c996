"""Product model."""

from sqlalchemy import Column, Float, Integer, String, Text
from sqlalchemy.orm import relationship

from catalog.database import Base
from catalog.models.mixins import IdentifierMixin, SoftDeleteMixin, TimestampMixin


class Product(Base, IdentifierMixin, TimestampMixin, SoftDeleteMixin):
    """Product model. References its category by id without a foreign key."""

    __tablename__ = "products"

    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="", server_default="")
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=0, server_default="0")
    category_id = Column(String(32), nullable=False, index=True)

    # Read-time join; unresolved when the category row is gone
    category = relationship(
        "Category",
        primaryjoin="foreign(Product.category_id) == Category.id",
        viewonly=True,
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<Product {self.id}: {self.name}>"
