from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import backref, relationship
from sqlalchemy.sql import expression, func

from app.database import Base


class Product(Base):
    """
    Product model representing items in the catalogue.

    Attributes:
        id: Unique identifier assigned by the database
        name: Product name (required, up to 200 characters)
        description: Optional free text (up to 1000 characters)
        price: Unit price with two decimal places
        stock_quantity: Units in stock, 0 when not given
        category_id: Optional category, nulled when the category is deleted
        is_available: Whether the product can be sold, true when not given
        created_at: Timestamp when product was created
        updated_at: Timestamp when product was last updated
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    description = Column(String(1000), nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=True, server_default="0")
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_available = Column(Boolean, nullable=True, server_default=expression.true())
    created_at = Column(DateTime(timezone=True), nullable=True, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, server_default=func.now())

    # Relationship to Category
    category = relationship("Category", backref=backref("products", passive_deletes=True))

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
