"""CRUD endpoints for products and their category links."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.api.dependencies.lookups import get_category_or_404, get_product_or_404
from catalog.api.schemas.category import CategoryRead
from catalog.api.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductRead,
    ProductUpdate,
)
from catalog.db.models.category import Category
from catalog.db.models.product import Product
from catalog.utils.validators import ValidationError, require_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List products with filters and pagination",
    response_model=ProductListResponse,
)
async def list_products(
    sku: str | None = Query(None, description="Filter by SKU (case-insensitive)"),
    name: str | None = Query(None, description="Filter by name (partial match)"),
    active: bool | None = Query(None, description="Filter by active status"),
    page: int = Query(1, ge=1, description="Page number (1-indexed)"),
    page_size: int = Query(
        50, ge=1, le=500, alias="pageSize", description="Items per page"
    ),
    db: Session = Depends(get_session),
) -> ProductListResponse:
    """Return a page of products that have not been soft deleted."""
    conditions = [~Product.is_deleted]
    if sku:
        conditions.append(func.lower(Product.sku).contains(sku.lower()))
    if name:
        conditions.append(Product.name.ilike(f"%{name}%"))
    if active is not None:
        conditions.append(Product.active == active)

    try:
        total = db.scalar(select(func.count(Product.id)).where(*conditions)) or 0
        products = db.scalars(
            select(Product)
            .where(*conditions)
            .order_by(Product.id)
            .offset((page - 1) * page_size)
            .limit(page_size)
        ).all()

        return ProductListResponse(
            items=[ProductRead.model_validate(p) for p in products],
            total=total,
            page=page,
            page_size=page_size,
        )
    except SQLAlchemyError as e:
        logger.error(f"Database error listing products: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve products",
        ) from e


@router.post(
    "",
    summary="Create a product",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductRead,
)
async def create_product(
    payload: ProductCreate,
    db: Session = Depends(get_session),
) -> ProductRead:
    """Persist a new product.

    SKU must be unique (case-insensitive). If a product with the same SKU
    exists but is deleted, it is restored with the submitted fields.
    """
    try:
        sku = require_text(payload.sku, "sku")
        name = require_text(payload.name, "name")
        description = payload.description.strip() if payload.description else None

        existing = db.scalar(select(Product).where(func.lower(Product.sku) == sku.lower()))
        if existing:
            if not existing.is_deleted:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=f"Product with SKU '{sku}' already exists",
                )
            existing.name = name
            existing.description = description
            existing.active = payload.active
            existing.is_deleted = False
            db.commit()
            db.refresh(existing)
            logger.info(f"Restored soft-deleted product {existing.id} with SKU {sku}")
            return ProductRead.model_validate(existing)

        product = Product(sku=sku, name=name, description=description, active=payload.active)
        db.add(product)
        db.commit()
        db.refresh(product)

        logger.info(f"Created product {product.id} with SKU {sku}")
        return ProductRead.model_validate(product)

    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error creating product: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to create product. SKU may already exist.",
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating product: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create product",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating product: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e


@router.get(
    "/{product_id}",
    summary="Get a product",
    response_model=ProductRead,
)
async def get_product(
    product: Product = Depends(get_product_or_404),
) -> ProductRead:
    return ProductRead.model_validate(product)


@router.patch(
    "/{product_id}",
    summary="Update a product",
    response_model=ProductRead,
)
async def update_product(
    payload: ProductUpdate,
    product: Product = Depends(get_product_or_404),
    db: Session = Depends(get_session),
) -> ProductRead:
    """Apply a partial update. The SKU cannot be changed."""
    try:
        if payload.name is not None:
            product.name = require_text(payload.name, "name")
        if payload.description is not None:
            product.description = payload.description.strip() or None
        if payload.active is not None:
            product.active = payload.active

        db.commit()
        db.refresh(product)

        logger.info(f"Updated product {product.id}")
        return ProductRead.model_validate(product)

    except ValidationError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error updating product {product.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update product",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error updating product {product.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e


@router.delete(
    "/{product_id}",
    summary="Delete product (soft delete)",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_product(
    product: Product = Depends(get_product_or_404),
    db: Session = Depends(get_session),
) -> Response:
    """Mark the product deleted; it disappears from listings and lookups."""
    try:
        product.is_deleted = True
        db.commit()

        logger.info(f"Soft deleted product {product.id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error deleting product {product.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete product",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error deleting product {product.id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e


@router.get(
    "/{product_id}/categories",
    summary="List the categories a product belongs to",
    response_model=list[CategoryRead],
)
async def list_product_categories(
    product: Product = Depends(get_product_or_404),
) -> list[CategoryRead]:
    return [CategoryRead.model_validate(c) for c in product.categories]


@router.put(
    "/{product_id}/categories/{category_id}",
    summary="Link a product to a category",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def link_category(
    product: Product = Depends(get_product_or_404),
    category: Category = Depends(get_category_or_404),
    db: Session = Depends(get_session),
) -> Response:
    """Add the category to the product. Linking twice is a no-op."""
    if category not in product.categories:
        product.categories.append(category)
        db.commit()
        logger.info(f"Linked product {product.id} to category {category.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}/categories/{category_id}",
    summary="Unlink a product from a category",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def unlink_category(
    product: Product = Depends(get_product_or_404),
    category: Category = Depends(get_category_or_404),
    db: Session = Depends(get_session),
) -> Response:
    if category not in product.categories:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product {product.id} is not in category {category.id}",
        )
    product.categories.remove(category)
    db.commit()
    logger.info(f"Unlinked product {product.id} from category {category.id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
