"""Database models package."""
from catalog.db.models.attribute import Attribute
from catalog.db.models.category import Category
from catalog.db.models.price import Price
from catalog.db.models.product import Product, product_categories
from catalog.db.models.translation import (
    CategoryTranslation,
    ProductTranslation,
    TranslationKind,
)

__all__ = [
    "Attribute",
    "Category",
    "CategoryTranslation",
    "Price",
    "Product",
    "ProductTranslation",
    "TranslationKind",
    "product_categories",
]
