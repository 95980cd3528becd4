"""Category endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.api.dependencies.lookups import get_category_or_404
from catalog.api.schemas.category import CategoryCreate, CategoryRead
from catalog.db.models.category import Category
from catalog.utils.validators import ValidationError, require_text

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    summary="List categories",
    response_model=list[CategoryRead],
)
async def list_categories(
    db: Session = Depends(get_session),
) -> list[CategoryRead]:
    try:
        categories = db.scalars(select(Category).order_by(Category.name)).all()
        return [CategoryRead.model_validate(c) for c in categories]
    except SQLAlchemyError as e:
        logger.error(f"Database error while listing categories: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve categories",
        ) from e


@router.post(
    "",
    summary="Create a category",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryRead,
)
async def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_session),
) -> CategoryRead:
    """Create a category; names are unique."""
    try:
        name = require_text(payload.name, "name")
        if db.scalar(select(Category).where(Category.name == name)):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Category with name '{name}' already exists",
            )

        category = Category(name=name)
        db.add(category)
        db.commit()
        db.refresh(category)

        logger.info(f"Created category {category.id} '{name}'")
        return CategoryRead.model_validate(category)

    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error creating category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Category with name '{payload.name}' already exists",
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e


@router.get(
    "/{category_id}",
    summary="Get a category",
    response_model=CategoryRead,
)
async def get_category(
    category: Category = Depends(get_category_or_404),
) -> CategoryRead:
    return CategoryRead.model_validate(category)


@router.delete(
    "/{category_id}",
    summary="Delete a category",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_category(
    category: Category = Depends(get_category_or_404),
    db: Session = Depends(get_session),
) -> Response:
    """Remove the category, its translations and its product links."""
    try:
        category_id = category.id
        db.delete(category)
        db.commit()

        logger.info(f"Deleted category {category_id}")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error deleting category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete category",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error deleting category: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e
