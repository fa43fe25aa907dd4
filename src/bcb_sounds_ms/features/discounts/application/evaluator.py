"""Discount evaluation."""

from decimal import Decimal
from typing import Any, Mapping

from bcb_sounds_ms.features.discounts.domain import (
    DEFAULT_DISCOUNT_CODES,
    AppliedDiscount,
    DiscountCode,
    DiscountKind,
    DiscountOutcome,
    normalize_code,
)
from bcb_sounds_ms.shared.domain.money import ZERO, round2, to_decimal


class DiscountEvaluator:
    """
    Applies promotional codes to prices.

    Stateless apart from the read-only code table, so a single instance is
    shared across concurrent requests.
    """

    def __init__(self, codes: Mapping[str, DiscountCode] | None = None) -> None:
        self._codes = DEFAULT_DISCOUNT_CODES if codes is None else codes

    @property
    def codes(self) -> Mapping[str, DiscountCode]:
        """The code table in use."""
        return self._codes

    def lookup(self, code: str) -> DiscountCode | None:
        """Find a code regardless of casing or surrounding whitespace."""
        return self._codes.get(normalize_code(code))

    def evaluate(self, original_price: Any, code: str) -> DiscountOutcome:
        """
        Evaluate ``code`` against ``original_price``.

        Unknown codes are not an error: the price passes through unchanged
        with ``valid=False``.
        """
        price = to_decimal(original_price)
        discount = self.lookup(code)

        if discount is None:
            return DiscountOutcome(valid=False, final_price=price, applied_code=None)

        if discount.kind == DiscountKind.PERCENTAGE:
            amount = price * discount.value / Decimal(100)
            final_price = price - amount
        else:
            amount = discount.value
            final_price = max(ZERO, price - amount)

        return DiscountOutcome(
            valid=True,
            final_price=round2(final_price),
            applied_code=AppliedDiscount(
                code=discount.code,
                amount=round2(amount),
                description=discount.description,
            ),
        )
