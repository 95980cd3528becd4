"""Category payloads."""

from datetime import datetime

from catalog.api.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str


class CategoryRead(CategoryCreate):
    id: int
    created_at: datetime | None = None
