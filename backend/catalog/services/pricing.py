"""Price construction defaults and partial updates."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from catalog.api.schemas.translation import PriceUpdateBody
from catalog.db.models.price import Price
from catalog.utils.validators import as_utc, normalize_currency

logger = logging.getLogger(__name__)

# Stand-in for "no end date"
DISTANT_FUTURE = datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def resolve_active(
    active_from: datetime,
    active_to: datetime,
    now: datetime | None = None,
) -> bool:
    """Return whether ``now`` falls inside the inclusive active window."""
    now = as_utc(now) if now else datetime.now(timezone.utc)
    return as_utc(active_from) <= now <= as_utc(active_to)


def build_price(
    amount: float,
    currency: str,
    translation_name: str,
    active_from: datetime | None = None,
    active_to: datetime | None = None,
    active: bool | None = None,
    now: datetime | None = None,
) -> Price:
    """Create an unsaved ``Price`` applying the creation defaults.

    Args:
        amount: Amount of ``currency`` required to buy the product
        currency: 3-character currency code, any case
        translation_name: Name of the translation that owns the price
        active_from: Start of validity; defaults to ``now``
        active_to: End of validity; defaults to ``DISTANT_FUTURE``
        active: Explicit flag; computed from the window when omitted
        now: Reference time, defaults to the current UTC time

    Raises:
        ValidationError: If ``currency`` is not exactly 3 characters long.
    """
    now = as_utc(now) if now else datetime.now(timezone.utc)
    start = as_utc(active_from) if active_from else now
    end = as_utc(active_to) if active_to else DISTANT_FUTURE

    return Price(
        amount=amount,
        currency=normalize_currency(currency),
        active_from=start,
        active_to=end,
        active=active if active is not None else resolve_active(start, end, now),
        translation_name=translation_name,
    )


def apply_price_update(price: Price, body: PriceUpdateBody) -> Price:
    """Overwrite the fields present in ``body`` and keep the others.

    ``active`` is taken from the body only; changing the dates does not
    recompute it.
    """
    if body.amount is not None:
        price.amount = body.amount
    if body.currency is not None:
        price.currency = normalize_currency(body.currency)
    if body.active_from is not None:
        price.active_from = as_utc(body.active_from)
    if body.active_to is not None:
        price.active_to = as_utc(body.active_to)
    if body.active is not None:
        price.active = body.active
    return price


def update_price(price: Price, body: PriceUpdateBody, db: Session) -> None:
    """Merge ``body`` into ``price`` and persist the result."""
    apply_price_update(price, body)
    db.commit()
    logger.info(f"Updated price {price.id} for translation '{price.translation_name}'")
