from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase keys on the wire while accepting snake_case too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBase(CamelModel):
    """
    Writable product fields.

    Business rules (non-blank name, non-negative price and stock) are enforced
    by ProductService so that violations come back as 400 with a message.
    """
    name: Optional[str] = Field(None, description="Product name (required, max 200 characters)")
    description: Optional[str] = Field(None, description="Optional description (max 1000 characters)")
    price: Decimal = Field(..., description="Unit price (must be non-negative)")
    stock_quantity: Optional[int] = Field(None, description="Units in stock, defaults to 0")
    category_id: Optional[int] = Field(None, description="Optional category ID")
    is_available: Optional[bool] = Field(None, description="Available for sale, defaults to true")


class ProductCreate(ProductBase):
    """Schema for creating a new product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for replacing the mutable fields of an existing product."""
    pass


class ProductResponse(CamelModel):
    """Schema for product response including all fields."""
    id: int
    name: str
    description: Optional[str] = None
    price: float
    stock_quantity: Optional[int] = None
    category_id: Optional[int] = None
    is_available: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """Error body returned for 4xx and 5xx responses."""
    message: str
    error: Optional[str] = None
