"""Translation and price payloads."""

from datetime import datetime

from pydantic import Field

from catalog.api.schemas.base import CamelModel


class PriceRead(CamelModel):
    id: int
    amount: float
    currency: str
    active_from: datetime
    active_to: datetime
    active: bool
    translation_name: str


class PriceUpdateBody(CamelModel):
    """Partial price update; omitted fields keep their stored value."""

    amount: float | None = None
    currency: str | None = None
    active_from: datetime | None = None
    active_to: datetime | None = None
    active: bool | None = None


class TranslationCreate(CamelModel):
    """Request body shared by product and category translations.

    The ``price*`` fields are only read when creating a product translation.
    """

    name: str
    description: str
    language_code: str = Field(..., description="Language code, i.e. 'en', 'es'")
    price: float | None = Field(None, description="Amount in the price currency")
    price_currency: str | None = Field(
        None, description="3-letter currency code, defaults to the configured currency"
    )
    price_active_from: datetime | None = None
    price_active_to: datetime | None = None
    price_active: bool | None = None


class TranslationRead(CamelModel):
    name: str
    description: str
    language_code: str
    price: PriceRead | None = Field(
        None, description="Only populated for product translations"
    )
