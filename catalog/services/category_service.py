"""Category service: CRUD over categories with soft delete."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.exceptions import ConflictError, NotFoundError
from catalog.models.category import Category
from catalog.schemas.category import CategoryCreate, CategoryUpdate
from catalog.schemas.common import Pagination, PaginationQuery
from catalog.services.query import apply_search, live_records, paginate

logger = logging.getLogger(__name__)

NAME_CONFLICT_MESSAGE = "Category name already exists"


class CategoryService:
    """Service for category persistence operations."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, params: PaginationQuery) -> tuple[list[Category], Pagination]:
        """List live categories, newest first, optionally filtered by search."""
        query = live_records(self.db.query(Category), Category)
        query = apply_search(query, Category, params.search)
        return paginate(query, Category, params)

    def find_by_id(self, category_id: str) -> Category:
        """Get a live category or raise NotFoundError."""
        category = (
            self.db.query(Category)
            .filter(Category.id == category_id, Category.is_deleted.is_(False))
            .first()
        )
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create(self, data: CategoryCreate) -> Category:
        self._ensure_name_available(data.name)

        category = Category(name=data.name, description=data.description)
        self.db.add(category)
        self._commit()
        self.db.refresh(category)
        logger.info(f"Created category {category.id} ({category.name!r})")
        return category

    def update(self, category_id: str, data: CategoryUpdate) -> Category:
        """Apply the supplied fields to a live category."""
        category = self.find_by_id(category_id)
        changes = data.model_dump(exclude_unset=True)

        if "name" in changes and changes["name"] != category.name:
            self._ensure_name_available(changes["name"], exclude_id=category.id)

        for field, value in changes.items():
            setattr(category, field, value)

        self._commit()
        self.db.refresh(category)
        logger.info(f"Updated category {category.id}: {sorted(changes)}")
        return category

    def soft_delete(self, category_id: str) -> Category:
        """Mark a live category deleted. Products keep their reference."""
        category = self.find_by_id(category_id)
        category.soft_delete()
        self.db.commit()
        self.db.refresh(category)
        logger.info(f"Soft-deleted category {category.id}")
        return category

    def hard_delete(self, category_id: str) -> Category:
        """Permanently remove a category, soft-deleted or not."""
        category = self.db.query(Category).filter(Category.id == category_id).first()
        if not category:
            raise NotFoundError("Category not found")

        # Detach first so the returned snapshot survives the delete
        self.db.expunge(category)
        self.db.query(Category).filter(Category.id == category_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        logger.info(f"Hard-deleted category {category_id}")
        return category

    def exists(self, category_id: str) -> bool:
        """Check whether a live category with this id exists."""
        return (
            self.db.query(Category.id)
            .filter(Category.id == category_id, Category.is_deleted.is_(False))
            .first()
            is not None
        )

    def _ensure_name_available(self, name: str, exclude_id: str | None = None) -> None:
        query = self.db.query(Category.id).filter(
            Category.name == name, Category.is_deleted.is_(False)
        )
        if exclude_id is not None:
            query = query.filter(Category.id != exclude_id)
        if query.first() is not None:
            logger.warning(f"Category name conflict: {name!r}")
            raise ConflictError(NAME_CONFLICT_MESSAGE)

    def _commit(self) -> None:
        """Commit, mapping a store-level uniqueness violation to a conflict."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Category write rejected by unique index: {e.orig}")
            raise ConflictError(NAME_CONFLICT_MESSAGE) from e
