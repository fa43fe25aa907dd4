"""Checkout use case - Look up an order for the success page."""

from bcb_sounds_ms.features.checkout.application.ports import PaymentGatewayPort
from bcb_sounds_ms.features.checkout.domain import CheckoutSession
from bcb_sounds_ms.shared.domain.exceptions import ValidationError


class GetOrderUseCase:
    """Reads a checkout session back from the payment provider."""

    def __init__(self, gateway: PaymentGatewayPort) -> None:
        self._gateway = gateway

    async def execute(self, session_id: str) -> CheckoutSession:
        if not session_id.strip():
            raise ValidationError("Session ID is required")
        return await self._gateway.retrieve_checkout_session(session_id.strip())
