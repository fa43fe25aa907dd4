"""Built-in promotional codes."""

from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping

from bcb_sounds_ms.features.discounts.domain.entities import DiscountCode, DiscountKind

DEFAULT_DISCOUNT_CODES: Mapping[str, DiscountCode] = MappingProxyType(
    {
        "BETA50": DiscountCode(
            "BETA50", DiscountKind.PERCENTAGE, Decimal("50"), "50% off beta discount"
        ),
        "SAVE20": DiscountCode("SAVE20", DiscountKind.PERCENTAGE, Decimal("20"), "20% off"),
        "FIRST10": DiscountCode(
            "FIRST10", DiscountKind.PERCENTAGE, Decimal("10"), "10% off first order"
        ),
        "PODCAST25": DiscountCode(
            "PODCAST25", DiscountKind.PERCENTAGE, Decimal("25"), "25% off for podcasters"
        ),
    }
)


def build_catalog(rules: Mapping[str, Mapping[str, Any]]) -> Mapping[str, DiscountCode]:
    """Build a read-only code table from configuration rules."""
    codes = (DiscountCode.from_config(code, dict(rule)) for code, rule in rules.items())
    return MappingProxyType({discount.code: discount for discount in codes})
