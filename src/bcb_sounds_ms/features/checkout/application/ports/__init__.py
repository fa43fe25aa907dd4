"""Checkout application ports."""

from bcb_sounds_ms.features.checkout.application.ports.payment_gateway_port import (
    CheckoutSessionRequest,
    CheckoutSessionResult,
    GatewayStatus,
    PaymentGatewayPort,
)

__all__ = [
    "PaymentGatewayPort",
    "CheckoutSessionRequest",
    "CheckoutSessionResult",
    "GatewayStatus",
]
