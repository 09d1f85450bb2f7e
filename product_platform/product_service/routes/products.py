"""
Product endpoints. Every route here requires a valid bearer token.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from ..auth import require_token
from ..db import get_db
from ..models import Product
from ..schemas import ErrorResponse, ProductCreate, ProductResponse, TokenClaims

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    dependencies=[Depends(require_token)],
    responses={
        400: {"description": "Invalid Token", "model": ErrorResponse},
        401: {"description": "Access Denied", "model": ErrorResponse},
        500: {"description": "Internal server error", "model": ErrorResponse}
    }
)

NOT_FOUND = {404: {"description": "Product not found.", "model": ErrorResponse}}


def internal_error(db: Session, exc: Exception, action: str) -> HTTPException:
    """Roll back, log the detail server-side and build the generic 500."""
    db.rollback()
    logger.error("Failed to %s: %s", action, exc, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal Server Error"
    )


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="Get all products",
    description="Retrieve a list of all products."
)
def list_products(db: Session = Depends(get_db)):
    try:
        return db.query(Product).all()
    except Exception as e:
        raise internal_error(db, e, "list products") from e


@router.post(
    "",
    response_model=ProductResponse,
    summary="Create a new product",
    description="Create a new product with the provided name and price."
)
def create_product(
    payload: ProductCreate,
    claims: TokenClaims = Depends(require_token),
    db: Session = Depends(get_db)
):
    product = Product(name=payload.name, price=payload.price)
    try:
        db.add(product)
        db.commit()
        db.refresh(product)
    except Exception as e:
        raise internal_error(db, e, "create product") from e

    logger.info("Product created: id=%s, user_id=%s", product.id, claims.user_id)
    return product


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=NOT_FOUND,
    summary="Get product by ID",
    description="Retrieve a single product by its ID."
)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product = db.query(Product).filter(Product.id == product_id).first()
    except Exception as e:
        raise internal_error(db, e, f"get product {product_id}") from e

    if product is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return product


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
    summary="Delete product by ID",
    description="Delete a single product by its ID."
)
def delete_product(
    product_id: int,
    claims: TokenClaims = Depends(require_token),
    db: Session = Depends(get_db)
):
    try:
        deleted = db.query(Product).filter(Product.id == product_id).delete(synchronize_session=False)
        db.commit()
    except Exception as e:
        raise internal_error(db, e, f"delete product {product_id}") from e

    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    logger.info("Product deleted: id=%s, user_id=%s", product_id, claims.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
