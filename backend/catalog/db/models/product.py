"""SQLAlchemy model for product records."""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import DateTime

from catalog.db.base import Base

product_categories = Table(
    "product_categories",
    Base.metadata,
    Column(
        "product_id",
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "category_id",
        Integer,
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    sku = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    attributes = relationship(
        "Attribute",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="Attribute.id",
    )
    translations = relationship(
        "ProductTranslation",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductTranslation.name",
    )
    categories = relationship(
        "Category",
        secondary=product_categories,
        back_populates="products",
        order_by="Category.name",
    )

    __table_args__ = (Index("ix_products_sku_lower", func.lower(sku), unique=True),)
