"""Attribute payloads."""

from pydantic import Field

from catalog.api.schemas.base import CamelModel


class AttributeCreate(CamelModel):
    name: str = Field(..., description="Unique per product")
    value: str


class AttributeRead(AttributeCreate):
    id: int
    product_id: int
