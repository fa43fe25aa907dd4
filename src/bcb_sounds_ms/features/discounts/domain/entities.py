"""Discount domain entities and value objects."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from bcb_sounds_ms.shared.domain.money import to_decimal


class DiscountKind(str, Enum):
    """How a discount value is applied to a price."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


def normalize_code(code: str) -> str:
    """Canonical form used for lookups: trimmed and upper-cased."""
    return code.strip().upper()


@dataclass(frozen=True)
class DiscountCode:
    """A promotional code. Defined at startup and never mutated."""

    code: str
    kind: DiscountKind
    value: Decimal
    description: str

    @classmethod
    def from_config(cls, code: str, rule: dict[str, Any]) -> "DiscountCode":
        """Build a code from a ``{kind, value, description}`` mapping."""
        return cls(
            code=normalize_code(code),
            kind=DiscountKind(str(rule.get("kind", rule.get("type", ""))).lower()),
            value=to_decimal(rule["value"]),
            description=str(rule.get("description", "")),
        )


@dataclass(frozen=True)
class AppliedDiscount:
    """The discount actually granted on an order."""

    code: str
    amount: Decimal
    description: str


@dataclass(frozen=True)
class DiscountOutcome:
    """Result of evaluating a code against a price."""

    valid: bool
    final_price: Decimal
    applied_code: AppliedDiscount | None = None

    @property
    def discount_amount(self) -> Decimal:
        """Amount taken off, zero when no code applied."""
        return self.applied_code.amount if self.applied_code else Decimal("0")
