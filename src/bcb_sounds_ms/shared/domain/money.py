"""Money helpers - Decimal amounts in major units, integers in minor units."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Parse a price to Decimal without picking up float noise."""
    if isinstance(value, Decimal):
        return value
    try:
        parsed = Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    if not parsed.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return parsed


def round2(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (pounds) to the nearest minor unit (pence)."""
    try:
        return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise ValueError(f"Amount out of range: {amount}") from e


def from_minor_units(amount: int | None) -> Decimal:
    """Convert minor units back to a 2dp major-unit amount."""
    return round2(Decimal(amount or 0) / 100)


def format_money(amount: Any, symbol: str = "£") -> str:
    """Render an amount for humans, e.g. ``£25.00``."""
    return f"{symbol}{round2(to_decimal(amount))}"
