from typing import List
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.product_repository import ProductRepository
from app.services.product_service import (
    InvalidArgumentError,
    ProductNotFoundError,
    ProductService,
)
from app.schemas.product import (
    ErrorResponse,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Wire a ProductService to the request's database session."""
    return ProductService(ProductRepository(db))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _server_error(message: str, exc: Exception) -> JSONResponse:
    logger.exception(f"{message}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": message, "error": str(exc)},
    )


@router.get(
    "",
    response_model=List[ProductResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List all products",
    description="Get every product in the catalogue."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get all products."""
    try:
        return service.list_all()
    except Exception as e:
        return _server_error("Error fetching products", e)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Get product by ID",
    description="Get detailed information about a specific product."
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID. IDs must be greater than 0."""
    try:
        product = service.get_by_id(product_id)
    except InvalidArgumentError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _server_error("Error fetching product", e)

    if product is None:
        return _error(status.HTTP_404_NOT_FOUND, f"Product with ID {product_id} not found")

    return product


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create a new product",
    description="Create a new product. Stock defaults to 0 and availability to true."
)
def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name, non-blank and at most 200 characters (required)
    - **price**: Product price, must be non-negative (required)
    - **stockQuantity**: Initial stock, must be non-negative (optional)
    - **isAvailable**: Whether the product is for sale (optional)

    The Location header points at the new product.
    """
    try:
        product = service.create(product_data)
    except InvalidArgumentError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _server_error("Error creating product", e)

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Update a product",
    description="Replace name, description, price, stock and availability of a product."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    Omitted stockQuantity resets to 0 and omitted isAvailable resets to true.
    """
    try:
        return service.update(product_id, product_data)
    except ProductNotFoundError as e:
        return _error(status.HTTP_404_NOT_FOUND, str(e))
    except InvalidArgumentError as e:
        return _error(status.HTTP_400_BAD_REQUEST, str(e))
    except Exception as e:
        return _server_error("Error updating product", e)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a product",
    description="Delete a product by ID."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    try:
        deleted = service.delete(product_id)
    except Exception as e:
        return _server_error("Error deleting product", e)

    if not deleted:
        return _error(status.HTTP_404_NOT_FOUND, f"Product with ID {product_id} not found")

    return Response(status_code=status.HTTP_204_NO_CONTENT)
