"""Checkout infrastructure module."""

from bcb_sounds_ms.features.checkout.infrastructure.adapters import (
    MockPaymentAdapter,
    StripePaymentAdapter,
)
from bcb_sounds_ms.features.checkout.infrastructure.provider_factory import (
    get_payment_gateway,
)

__all__ = ["MockPaymentAdapter", "StripePaymentAdapter", "get_payment_gateway"]
