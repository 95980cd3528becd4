"""Pydantic models describing Product payloads."""

from datetime import datetime

from pydantic import Field

from catalog.api.schemas.base import CamelModel


class ProductBase(CamelModel):
    sku: str = Field(..., description="Case-insensitive unique SKU")
    name: str
    description: str | None = None
    active: bool = True


class ProductCreate(ProductBase):
    """Schema for manually created products."""


class ProductUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    active: bool | None = None


class ProductRead(ProductBase):
    id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(CamelModel):
    items: list[ProductRead]
    total: int
    page: int
    page_size: int
