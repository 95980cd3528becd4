"""Translation endpoints shared by products and categories.

One router is built per ``TranslationKind``; the owner lookup dependency
decides which parent the path resolves to.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.api.dependencies.db import get_session
from catalog.api.dependencies.lookups import get_category_or_404, get_product_or_404
from catalog.api.schemas.translation import (
    PriceUpdateBody,
    TranslationCreate,
    TranslationRead,
)
from catalog.core.config import Settings, get_settings
from catalog.db.models.product import Product
from catalog.db.models.translation import TranslationKind
from catalog.services import translations as translation_service
from catalog.services.errors import CatalogError
from catalog.services.pricing import update_price
from catalog.utils.validators import ValidationError

logger = logging.getLogger(__name__)


def build_translation_router(
    kind: TranslationKind,
    get_owner: Callable[..., Any],
) -> APIRouter:
    """Create list/create/read routes for the ``kind`` translation variant."""
    router = APIRouter()

    @router.get(
        "",
        summary=f"List {kind.value} translations",
        response_model=list[TranslationRead],
    )
    async def list_translations(
        owner: Any = Depends(get_owner),
        db: Session = Depends(get_session),
    ) -> list[TranslationRead]:
        translations = translation_service.list_translations(kind, owner, db)
        return [translation_service.to_response(kind, t) for t in translations]

    @router.post(
        "",
        summary=f"Create a {kind.value} translation",
        status_code=status.HTTP_201_CREATED,
        response_model=TranslationRead,
    )
    async def create_translation(
        payload: TranslationCreate,
        owner: Any = Depends(get_owner),
        db: Session = Depends(get_session),
        settings: Settings = Depends(get_settings),
    ) -> TranslationRead:
        try:
            translation = translation_service.create_translation(
                kind, owner, payload, db, settings.default_currency
            )
            db.commit()
            return translation_service.to_response(kind, translation)

        except (CatalogError, ValidationError) as e:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
            ) from e
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Integrity error creating {kind.value} translation: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Translation already exists with name '{payload.name}'",
            ) from e
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error creating {kind.value} translation: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create translation",
            ) from e
        except Exception as e:
            db.rollback()
            logger.error(f"Unexpected error creating {kind.value} translation: {e}", exc_info=True)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An unexpected error occurred",
            ) from e

    @router.get(
        "/{name}",
        summary=f"Get a {kind.value} translation",
        response_model=TranslationRead,
    )
    async def get_translation(
        name: str,
        owner: Any = Depends(get_owner),
        db: Session = Depends(get_session),
    ) -> TranslationRead:
        translation = translation_service.get_translation(kind, owner, name, db)
        if translation is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Translation not found")
        return translation_service.to_response(kind, translation)

    return router


product_router = build_translation_router(TranslationKind.PRODUCT, get_product_or_404)
category_router = build_translation_router(TranslationKind.CATEGORY, get_category_or_404)


@product_router.patch(
    "/{name}/price",
    summary="Partially update a translation's price",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def update_translation_price(
    name: str,
    payload: PriceUpdateBody,
    product: Product = Depends(get_product_or_404),
    db: Session = Depends(get_session),
) -> Response:
    """Overwrite only the price fields present in the body."""
    translation = translation_service.get_translation(
        TranslationKind.PRODUCT, product, name, db
    )
    if translation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Translation not found")
    if translation.price is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Translation has no price")

    try:
        update_price(translation.price, payload, db)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except ValidationError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)
        ) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error updating price for '{name}': {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update price",
        ) from e
    except Exception as e:
        db.rollback()
        logger.error(f"Unexpected error updating price for '{name}': {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
        ) from e
