from typing import List, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    """
    Data access for the products table.

    No validation or defaulting happens here: whatever the caller passes is
    persisted as-is. Every mutation is committed before returning, and any
    database error rolls the session back and propagates unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Product]:
        """Return every product."""
        return self.db.query(Product).all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with the given ID, or None."""
        return self.db.query(Product).filter(Product.id == product_id).first()

    def insert(self, product: Product) -> Product:
        """Persist a new product. The instance receives its database ID."""
        self.db.add(product)
        self._commit()
        self.db.refresh(product)
        return product

    def update(self, product: Product) -> Product:
        """Write back all field values of an existing product."""
        product = self.db.merge(product)
        self._commit()
        self.db.refresh(product)
        return product

    def delete(self, product_id: int) -> None:
        """Remove the product if it exists; missing IDs are ignored."""
        product = self.get_by_id(product_id)
        if product is None:
            return

        self.db.delete(product)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error while saving products: {e}")
            raise
