"""Checkout domain entities."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from bcb_sounds_ms.features.checkout.domain.enums import PackageType
from bcb_sounds_ms.features.discounts.domain import AppliedDiscount
from bcb_sounds_ms.shared.domain.money import ZERO, from_minor_units, to_decimal

# Sentinel stored in session metadata when no code was entered
NO_DISCOUNT_CODE = "none"

PACKAGE_DESCRIPTIONS: dict[PackageType, str] = {
    PackageType.BASIC: "Basic Package - 30 second AI-generated track",
    PackageType.STANDARD: "Standard Package - 60 second professional soundtrack",
    PackageType.PREMIUM: "Premium Package - Complete audio branding suite",
    PackageType.ENTERPRISE: "Enterprise Package - Custom solution",
}

DEFAULT_PACKAGE_DESCRIPTION = "Custom AI-generated music"


def package_display_name(package_type: str) -> str:
    """``standard`` -> ``Standard Package``."""
    return f"{package_type[:1].upper()}{package_type[1:]} Package"


def package_description(package_type: str) -> str:
    """Line-item description, falling back to a generic one for unknown packages."""
    try:
        return PACKAGE_DESCRIPTIONS[PackageType(package_type)]
    except ValueError:
        return DEFAULT_PACKAGE_DESCRIPTION


@dataclass
class OrderRequest:
    """A checkout request from the storefront."""

    package_type: str | None
    original_price: Decimal | None
    discount_code: str | None = None
    customer_email: str | None = None


@dataclass
class SessionDescriptor:
    """What the storefront needs to redirect the customer to checkout."""

    session_id: str
    url: str | None
    applied_discount: AppliedDiscount | None = None
    amount_minor: int = 0


@dataclass
class CheckoutSession:
    """
    A checkout session as read back from the payment provider.

    ``metadata`` holds the order context attached at creation
    (packageType, originalPrice, discountCode, discountAmount).
    """

    id: str
    customer_email: str | None = None
    amount_total: int | None = None
    currency: str | None = None
    payment_status: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CheckoutSession":
        """Build from a Stripe ``checkout.session`` object."""
        customer_details = data.get("customer_details") or {}
        return cls(
            id=data.get("id", ""),
            customer_email=data.get("customer_email") or customer_details.get("email"),
            amount_total=data.get("amount_total"),
            currency=data.get("currency"),
            payment_status=data.get("payment_status"),
            metadata={k: str(v) for k, v in (data.get("metadata") or {}).items()},
        )

    @property
    def package_type(self) -> str | None:
        """Package recorded at creation."""
        return self.metadata.get("packageType")

    @property
    def discount_code(self) -> str:
        """Code recorded at creation, or the ``none`` sentinel."""
        return self.metadata.get("discountCode") or NO_DISCOUNT_CODE

    @property
    def has_discount(self) -> bool:
        """Whether a code was entered at checkout."""
        return self.discount_code != NO_DISCOUNT_CODE

    @property
    def discount_amount(self) -> Decimal:
        """Amount taken off at creation, zero when absent or unreadable."""
        try:
            return to_decimal(self.metadata.get("discountAmount") or ZERO)
        except ValueError:
            return ZERO

    @property
    def amount_paid(self) -> Decimal:
        """Total charged, in major units."""
        return from_minor_units(self.amount_total)
