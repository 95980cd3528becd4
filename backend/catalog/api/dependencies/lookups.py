"""Resolve path parameters to parent entities."""

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.db.models.category import Category
from catalog.db.models.product import Product


def get_product_or_404(
    product_id: int,
    db: Session = Depends(get_session),
) -> Product:
    """Load a product that has not been soft deleted."""
    product = db.get(Product, product_id)
    if product is None or product.is_deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product {product_id} not found",
        )
    return product


def get_category_or_404(
    category_id: int,
    db: Session = Depends(get_session),
) -> Category:
    category = db.get(Category, category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category {category_id} not found",
        )
    return category
