from datetime import datetime, timezone
from typing import List, Optional
import logging

from app.models.product import Product
from app.repositories.product_repository import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 200


class InvalidArgumentError(ValueError):
    """Exception raised when caller-supplied data breaks a business rule."""
    pass


class ProductNotFoundError(LookupError):
    """Exception raised when the product to update doesn't exist."""
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProductService:
    """
    Service class holding the business rules for products.

    This service handles:
    - Validating names, prices and stock before anything is written
    - Filling in defaults (stock 0, available true, timestamps)
    - Delegating persistence to ProductRepository

    Reads are passed straight through, apart from rejecting non-positive IDs.
    """

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def list_all(self) -> List[Product]:
        """Get all products."""
        return self.repository.list_all()

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by ID.

        Raises:
            InvalidArgumentError: If product_id is not positive
        """
        if product_id <= 0:
            raise InvalidArgumentError("ID must be greater than 0")

        return self.repository.get_by_id(product_id)

    def create(self, product_data: ProductCreate) -> Product:
        """
        Create a new product.

        Rules are checked in order and the first violation is reported:
        1. name must not be blank
        2. name must not exceed 200 characters
        3. price must be >= 0
        4. stock_quantity, when given, must be >= 0

        Args:
            product_data: Product creation data

        Returns:
            Created product instance with its database ID

        Raises:
            InvalidArgumentError: If a rule is violated
        """
        self._validate_name(product_data.name)
        if len(product_data.name) > MAX_NAME_LENGTH:
            self._reject(f"Product name cannot exceed {MAX_NAME_LENGTH} characters")
        self._validate_price(product_data.price)
        if product_data.stock_quantity is not None and product_data.stock_quantity < 0:
            self._reject("Stock quantity cannot be negative")

        now = utc_now()
        product = Product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock_quantity=self._default(product_data.stock_quantity, 0),
            category_id=product_data.category_id,
            is_available=self._default(product_data.is_available, True),
            created_at=now,
            updated_at=now,
        )

        product = self.repository.insert(product)
        logger.info(f"Product #{product.id} created")
        return product

    def update(self, product_id: int, product_data: ProductUpdate) -> Product:
        """
        Replace the mutable fields of an existing product.

        Only name and price are validated here; stock_quantity is written as
        given (0 when missing). created_at is left untouched.

        Raises:
            ProductNotFoundError: If no product has this ID
            InvalidArgumentError: If name or price is invalid
        """
        product = self.repository.get_by_id(product_id)

        if product is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")

        self._validate_name(product_data.name)
        self._validate_price(product_data.price)

        product.name = product_data.name
        product.description = product_data.description
        product.price = product_data.price
        product.stock_quantity = self._default(product_data.stock_quantity, 0)
        product.is_available = self._default(product_data.is_available, True)
        product.updated_at = utc_now()

        product = self.repository.update(product)
        logger.info(f"Product #{product_id} updated")
        return product

    def delete(self, product_id: int) -> bool:
        """
        Delete a product.

        Returns:
            True if deleted, False if not found
        """
        product = self.repository.get_by_id(product_id)

        if product is None:
            return False

        self.repository.delete(product_id)
        logger.info(f"Product #{product_id} deleted")
        return True

    def _validate_name(self, name: Optional[str]) -> None:
        if name is None or not name.strip():
            self._reject("Product name is required")

    def _validate_price(self, price) -> None:
        if price < 0:
            self._reject("Price cannot be negative")

    @staticmethod
    def _default(value, fallback):
        return fallback if value is None else value

    @staticmethod
    def _reject(message: str) -> None:
        logger.warning(f"Product rejected: {message}")
        raise InvalidArgumentError(message)
