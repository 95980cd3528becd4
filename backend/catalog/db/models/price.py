"""SQLAlchemy model for translation prices."""

from sqlalchemy import Boolean, Column, Float, Integer, String
from sqlalchemy.types import DateTime

from catalog.db.base import Base


class Price(Base):
    """Amount charged for a product in the region a translation serves.

    ``translation_name`` points back at the owning ``ProductTranslation``.
    It is a plain indexed column: the price row is written before its
    translation exists, so a foreign key cannot be declared here.
    """

    __tablename__ = "prices"

    id = Column(Integer, primary_key=True)
    amount = Column(Float, nullable=False)
    currency = Column(String(3), nullable=False)
    active_from = Column(DateTime(timezone=True), nullable=False)
    active_to = Column(DateTime(timezone=True), nullable=False)
    active = Column(Boolean, nullable=False, default=False)
    translation_name = Column(String(255), nullable=False, index=True)
