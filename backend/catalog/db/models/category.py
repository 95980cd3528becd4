"""SQLAlchemy model for product categories."""

from sqlalchemy import Column, Integer, String, func
from sqlalchemy.orm import relationship
from sqlalchemy.types import DateTime

from catalog.db.base import Base
from catalog.db.models.product import product_categories


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    translations = relationship(
        "CategoryTranslation",
        back_populates="category",
        cascade="all, delete-orphan",
        order_by="CategoryTranslation.name",
    )
    products = relationship(
        "Product",
        secondary=product_categories,
        back_populates="categories",
    )
