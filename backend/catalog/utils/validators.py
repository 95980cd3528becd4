"""Validate and normalize user-supplied catalog fields."""

from __future__ import annotations

from datetime import datetime, timezone


class ValidationError(ValueError):
    """Raised when a request field fails a catalog constraint."""

    pass


CURRENCY_CODE_LENGTH = 3


def normalize_currency(currency: str) -> str:
    """Return the currency code uppercased, rejecting anything not 3 characters long."""
    if len(currency) != CURRENCY_CODE_LENGTH:
        raise ValidationError(
            f"'currency' field must contain {CURRENCY_CODE_LENGTH} characters. "
            f"Found {len(currency)}"
        )
    return currency.upper()


def require_text(value: str | None, field: str) -> str:
    """Strip a required string field, rejecting blank values."""
    cleaned = value.strip() if isinstance(value, str) else ""
    if not cleaned:
        raise ValidationError(f"'{field}' is required and cannot be empty")
    return cleaned


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
