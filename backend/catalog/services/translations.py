"""Create and project product/category translations.

Both variants share one request body (``TranslationCreate``) and one
response body (``TranslationRead``). The variant is carried as a
``TranslationKind`` tag chosen by the route; the model class and the
creator are looked up by that tag.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

from sqlalchemy import select
from sqlalchemy.orm import Session

from catalog.api.schemas.translation import PriceRead, TranslationCreate, TranslationRead
from catalog.db.models.category import Category
from catalog.db.models.product import Product
from catalog.db.models.translation import (
    CategoryTranslation,
    ProductTranslation,
    TranslationKind,
)
from catalog.services.errors import DuplicateError, MissingFieldError
from catalog.services.pricing import build_price
from catalog.utils.validators import require_text

logger = logging.getLogger(__name__)

Translation = Union[ProductTranslation, CategoryTranslation]
Owner = Union[Product, Category]

MODELS: dict[TranslationKind, type] = {
    TranslationKind.PRODUCT: ProductTranslation,
    TranslationKind.CATEGORY: CategoryTranslation,
}

OWNER_COLUMNS = {
    TranslationKind.PRODUCT: ProductTranslation.product_id,
    TranslationKind.CATEGORY: CategoryTranslation.category_id,
}


def _ensure_unique_name(kind: TranslationKind, name: str, db: Session) -> None:
    if db.get(MODELS[kind], name) is not None:
        raise DuplicateError(f"Translation already exists with name '{name}'")


def create_product_translation(
    product: Product,
    content: TranslationCreate,
    db: Session,
    default_currency: str,
) -> ProductTranslation:
    """Write the translation's price, then the translation referencing it."""
    if content.price is None:
        raise MissingFieldError("Request body must contain 'price' key")

    name = require_text(content.name, "name")
    _ensure_unique_name(TranslationKind.PRODUCT, name, db)

    price = build_price(
        amount=content.price,
        currency=default_currency if content.price_currency is None else content.price_currency,
        translation_name=name,
        active_from=content.price_active_from,
        active_to=content.price_active_to,
        active=content.price_active,
    )
    db.add(price)
    db.flush()

    translation = ProductTranslation(
        name=name,
        description=content.description,
        language_code=require_text(content.language_code, "languageCode"),
        product_id=product.id,
        price_id=price.id,
    )
    translation.price = price
    db.add(translation)
    db.flush()
    return translation


def create_category_translation(
    category: Category,
    content: TranslationCreate,
    db: Session,
    default_currency: str,
) -> CategoryTranslation:
    """Persist a category translation; price fields in ``content`` are ignored."""
    name = require_text(content.name, "name")
    _ensure_unique_name(TranslationKind.CATEGORY, name, db)

    translation = CategoryTranslation(
        name=name,
        description=content.description,
        language_code=require_text(content.language_code, "languageCode"),
        category_id=category.id,
    )
    db.add(translation)
    db.flush()
    return translation


CREATORS: dict[TranslationKind, Callable[..., Translation]] = {
    TranslationKind.PRODUCT: create_product_translation,
    TranslationKind.CATEGORY: create_category_translation,
}


def create_translation(
    kind: TranslationKind,
    owner: Owner,
    content: TranslationCreate,
    db: Session,
    default_currency: str,
) -> Translation:
    """Create the ``kind`` variant of a translation for ``owner``.

    Raises:
        MissingFieldError: Product translation without a ``price``.
        DuplicateError: The name is already taken within the variant.
        ValidationError: Blank fields or a malformed currency code.
    """
    translation = CREATORS[kind](owner, content, db, default_currency)
    logger.info(f"Created {kind.value} translation '{translation.name}' for {kind.value} {owner.id}")
    return translation


def to_response(kind: TranslationKind, translation: Translation) -> TranslationRead:
    """Project either variant onto the uniform response body."""
    price = translation.price if kind is TranslationKind.PRODUCT else None
    return TranslationRead(
        name=translation.name,
        description=translation.description,
        language_code=translation.language_code,
        price=PriceRead.model_validate(price) if price is not None else None,
    )


def list_translations(kind: TranslationKind, owner: Owner, db: Session) -> list[Translation]:
    model = MODELS[kind]
    query = select(model).where(OWNER_COLUMNS[kind] == owner.id).order_by(model.name)
    return list(db.scalars(query).all())


def get_translation(
    kind: TranslationKind,
    owner: Owner,
    name: str,
    db: Session,
) -> Translation | None:
    """Return the owner's translation called ``name``, or None."""
    model = MODELS[kind]
    query = select(model).where(model.name == name, OWNER_COLUMNS[kind] == owner.id)
    return db.scalar(query)
