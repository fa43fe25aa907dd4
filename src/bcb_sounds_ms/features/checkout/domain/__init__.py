"""Checkout domain entities and value objects."""

from bcb_sounds_ms.features.checkout.domain.entities import (
    NO_DISCOUNT_CODE,
    CheckoutSession,
    OrderRequest,
    SessionDescriptor,
    package_description,
    package_display_name,
)
from bcb_sounds_ms.features.checkout.domain.enums import PackageType, PaymentStatus

__all__ = [
    "NO_DISCOUNT_CODE",
    "CheckoutSession",
    "OrderRequest",
    "SessionDescriptor",
    "PackageType",
    "PaymentStatus",
    "package_description",
    "package_display_name",
]
