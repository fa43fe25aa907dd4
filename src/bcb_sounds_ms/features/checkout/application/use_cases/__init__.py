"""Checkout use cases."""

from bcb_sounds_ms.features.checkout.application.use_cases.create_checkout_session import (
    CreateCheckoutSessionUseCase,
)
from bcb_sounds_ms.features.checkout.application.use_cases.get_order import (
    GetOrderUseCase,
)

__all__ = ["CreateCheckoutSessionUseCase", "GetOrderUseCase"]
