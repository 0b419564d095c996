"""Category model."""

from sqlalchemy import Column, Index, String, Text, text

from catalog.database import Base
from catalog.models.mixins import IdentifierMixin, SoftDeleteMixin, TimestampMixin


class Category(Base, IdentifierMixin, TimestampMixin, SoftDeleteMixin):
    """Category model for grouping products."""

    __tablename__ = "categories"
    __table_args__ = (
        # Names are unique among live categories only
        Index(
            "uq_categories_name_live",
            "name",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
    )

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="", server_default="")

    def __repr__(self) -> str:
        return f"<Category {self.id}: {self.name}>"
