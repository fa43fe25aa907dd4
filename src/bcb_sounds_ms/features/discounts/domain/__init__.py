"""Discount domain entities and the built-in code table."""

from bcb_sounds_ms.features.discounts.domain.catalog import (
    DEFAULT_DISCOUNT_CODES,
    build_catalog,
)
from bcb_sounds_ms.features.discounts.domain.entities import (
    AppliedDiscount,
    DiscountCode,
    DiscountKind,
    DiscountOutcome,
    normalize_code,
)

__all__ = [
    "AppliedDiscount",
    "DiscountCode",
    "DiscountKind",
    "DiscountOutcome",
    "normalize_code",
    "DEFAULT_DISCOUNT_CODES",
    "build_catalog",
]
