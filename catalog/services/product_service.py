"""Product service: CRUD over products with soft delete."""

import logging

from sqlalchemy.orm import Session

from catalog.exceptions import InvalidReferenceError, NotFoundError
from catalog.models.product import Product
from catalog.schemas.common import Pagination, PaginationQuery
from catalog.schemas.product import ProductCreate, ProductUpdate
from catalog.services.category_service import CategoryService
from catalog.services.query import apply_search, live_records, paginate

logger = logging.getLogger(__name__)


class ProductService:
    """Service for product persistence operations."""

    def __init__(self, db: Session, category_service: CategoryService | None = None):
        self.db = db
        self.category_service = category_service or CategoryService(db)

    def find_all(
        self, params: PaginationQuery, category_id: str | None = None
    ) -> tuple[list[Product], Pagination]:
        """List live products, newest first.

        Optionally narrowed by a search term (name or description) and by
        the id of the category they belong to.
        """
        query = live_records(self.db.query(Product), Product)
        if category_id:
            query = query.filter(Product.category_id == category_id)
        query = apply_search(query, Product, params.search)
        return paginate(query, Product, params)

    def find_by_id(self, product_id: str) -> Product:
        """Get a live product or raise NotFoundError."""
        product = (
            self.db.query(Product)
            .filter(Product.id == product_id, Product.is_deleted.is_(False))
            .first()
        )
        if not product:
            raise NotFoundError("Product not found")
        return product

    def create(self, data: ProductCreate) -> Product:
        self._ensure_category(data.category_id)

        product = Product(**data.model_dump())
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        logger.info(f"Created product {product.id} ({product.name!r})")
        return product

    def update(self, product_id: str, data: ProductUpdate) -> Product:
        """Apply the supplied fields to a live product."""
        product = self.find_by_id(product_id)
        changes = data.model_dump(exclude_unset=True)

        if "category_id" in changes and changes["category_id"] != product.category_id:
            self._ensure_category(changes["category_id"])

        for field, value in changes.items():
            setattr(product, field, value)

        self.db.commit()
        self.db.refresh(product)
        logger.info(f"Updated product {product.id}: {sorted(changes)}")
        return product

    def soft_delete(self, product_id: str) -> Product:
        product = self.find_by_id(product_id)
        product.soft_delete()
        self.db.commit()
        self.db.refresh(product)
        logger.info(f"Soft-deleted product {product.id}")
        return product

    def hard_delete(self, product_id: str) -> Product:
        """Permanently remove a product, soft-deleted or not."""
        product = self.db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFoundError("Product not found")

        # Detach first so the returned snapshot survives the delete
        self.db.expunge(product)
        self.db.query(Product).filter(Product.id == product_id).delete(
            synchronize_session=False
        )
        self.db.commit()
        logger.info(f"Hard-deleted product {product_id}")
        return product

    def _ensure_category(self, category_id: str) -> None:
        if not self.category_service.exists(category_id):
            logger.warning(f"Rejected product write: category {category_id} not found")
            raise InvalidReferenceError("Category not found", field="categoryId")
