"""Payment gateway adapters."""

from bcb_sounds_ms.features.checkout.infrastructure.adapters.mock_adapter import (
    MockPaymentAdapter,
)
from bcb_sounds_ms.features.checkout.infrastructure.adapters.stripe_adapter import (
    StripePaymentAdapter,
)

__all__ = ["MockPaymentAdapter", "StripePaymentAdapter"]
