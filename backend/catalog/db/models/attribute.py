"""SQLAlchemy model for product attributes (name/value pairs)."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from catalog.db.base import Base


class Attribute(Base):
    __tablename__ = "attributes"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    value = Column(Text, nullable=False)
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    product = relationship("Product", back_populates="attributes")

    __table_args__ = (
        UniqueConstraint("product_id", "name", name="uq_attributes_product_name"),
    )
