"""Attribute endpoints nested under a product."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.api.dependencies.lookups import get_product_or_404
from catalog.api.schemas.attribute import AttributeCreate, AttributeRead
from catalog.db.models.attribute import Attribute
from catalog.db.models.product import Product
from catalog.utils.validators import ValidationError, require_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="List a product's attributes",
    response_model=list[AttributeRead],
)
async def list_attributes(
    product: Product = Depends(get_product_or_404),
) -> list[AttributeRead]:
    return [AttributeRead.model_validate(a) for a in product.attributes]


@router.post(
    "",
    summary="Add an attribute to a product",
    status_code=status.HTTP_201_CREATED,
    response_model=AttributeRead,
)
async def create_attribute(
    payload: AttributeCreate,
    product: Product = Depends(get_product_or_404),
    db: Session = Depends(get_session),
) -> AttributeRead:
    """Attach a name/value attribute to the product.

    Names are unique per product; a second attribute with the same name
    is rejected with 400.
    """
    try:
        name = require_text(payload.name, "name")

        existing = db.scalar(
            select(func.count(Attribute.id)).where(
                Attribute.product_id == product.id,
                Attribute.name == name,
            )
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Attribute already exists for product with name '{name}'",
            )

        attribute = Attribute(name=name, value=payload.value, product_id=product.id)
        db.add(attribute)
        db.commit()
        db.refresh(attribute)

        logger.info(f"Created attribute '{name}' for product {product.id}")
        return AttributeRead.model_validate(attribute)

    except HTTPException:
        raise
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Integrity error creating attribute: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Attribute already exists for product with name '{payload.name}'",
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error creating attribute: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create attribute",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error creating attribute: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e
