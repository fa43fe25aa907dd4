"""Shared domain module - Exceptions and money types."""

from bcb_sounds_ms.shared.domain.exceptions import (
    GatewayError,
    MailDeliveryError,
    OrderNotFoundError,
    OrderServiceError,
    PaymentProviderError,
    ValidationError,
    WebhookVerificationError,
)

__all__ = [
    "OrderServiceError",
    "ValidationError",
    "OrderNotFoundError",
    "GatewayError",
    "PaymentProviderError",
    "MailDeliveryError",
    "WebhookVerificationError",
]
