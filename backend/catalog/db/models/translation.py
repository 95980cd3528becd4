"""SQLAlchemy models for localized product and category text.

Both variants are keyed by their human-readable ``name``; the primary key
is what guarantees that a name is used at most once per variant table.
"""

import enum

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from catalog.db.base import Base


class TranslationKind(str, enum.Enum):
    """Tag selecting which translation variant a request operates on."""

    PRODUCT = "product"
    CATEGORY = "category"


class ProductTranslation(Base):
    __tablename__ = "product_translations"

    name = Column(String(255), primary_key=True)
    description = Column(Text, nullable=False)
    language_code = Column(String(16), nullable=False, index=True)
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    price_id = Column(Integer, ForeignKey("prices.id", ondelete="SET NULL"))

    product = relationship("Product", back_populates="translations")
    price = relationship(
        "Price",
        foreign_keys=[price_id],
        cascade="all, delete-orphan",
        single_parent=True,
    )


class CategoryTranslation(Base):
    __tablename__ = "category_translations"

    name = Column(String(255), primary_key=True)
    description = Column(Text, nullable=False)
    language_code = Column(String(16), nullable=False, index=True)
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    category = relationship("Category", back_populates="translations")
