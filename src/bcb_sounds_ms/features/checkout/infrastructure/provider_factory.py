"""Payment gateway factory - Dependency injection."""

from functools import lru_cache

from bcb_sounds_ms.features.checkout.application.ports import PaymentGatewayPort
from bcb_sounds_ms.features.checkout.infrastructure.adapters import (
    MockPaymentAdapter,
    StripePaymentAdapter,
)
from bcb_sounds_ms.shared.core.settings import get_settings


@lru_cache
def get_payment_gateway() -> PaymentGatewayPort:
    """
    Get the payment gateway based on configuration.

    Factory function for dependency injection.
    """
    settings = get_settings()

    match settings.payment_provider:
        case "stripe":
            return StripePaymentAdapter()
        case _:
            return MockPaymentAdapter()
