"""Checkout domain enums."""

from enum import Enum


class PackageType(str, Enum):
    """Packages sold on the storefront."""

    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class PaymentStatus(str, Enum):
    """Checkout session payment status as reported by Stripe."""

    PAID = "paid"
    UNPAID = "unpaid"
    NO_PAYMENT_REQUIRED = "no_payment_required"
