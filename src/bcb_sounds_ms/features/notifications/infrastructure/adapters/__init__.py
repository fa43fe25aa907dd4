"""Mail gateway adapters."""

from bcb_sounds_ms.features.notifications.infrastructure.adapters.mock_adapter import (
    MockMailAdapter,
)
from bcb_sounds_ms.features.notifications.infrastructure.adapters.resend_adapter import (
    ResendMailAdapter,
)

__all__ = ["MockMailAdapter", "ResendMailAdapter"]
