"""Stripe Payment Gateway Adapter."""

import asyncio
import json
from typing import Any

import stripe
import structlog

from bcb_sounds_ms.features.checkout.application.ports import (
    CheckoutSessionRequest,
    CheckoutSessionResult,
    GatewayStatus,
    PaymentGatewayPort,
)
from bcb_sounds_ms.features.checkout.domain import CheckoutSession
from bcb_sounds_ms.features.webhooks.domain import WebhookEvent
from bcb_sounds_ms.shared.core.settings import Settings, get_settings
from bcb_sounds_ms.shared.domain.exceptions import (
    OrderNotFoundError,
    PaymentProviderError,
    WebhookVerificationError,
)

logger = structlog.get_logger()


class StripePaymentAdapter(PaymentGatewayPort):
    """
    Stripe payment gateway adapter.

    Integrates with Stripe Checkout for payment processing. The Stripe SDK
    is blocking, so every API call runs in a worker thread.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        stripe.api_key = self._settings.stripe_secret_key
        stripe.default_http_client = stripe.RequestsClient(
            timeout=self._settings.gateway_timeout_seconds
        )

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "stripe"

    @property
    def mode(self) -> str:
        """``test`` or ``live`` depending on the secret key."""
        return "test" if "test" in self._settings.stripe_secret_key else "live"

    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSessionResult:
        """
        Create a Stripe Checkout Session.

        Returns a checkout URL for redirecting the customer.
        """
        params: dict[str, Any] = {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": request.currency,
                        "unit_amount": request.amount_minor,
                        "product_data": {
                            "name": request.product_name,
                            "description": request.description,
                        },
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "success_url": request.success_url,
            "cancel_url": request.cancel_url,
            "metadata": request.metadata,
            "billing_address_collection": "required",
            "allow_promotion_codes": True,
        }
        if request.customer_email:
            params["customer_email"] = request.customer_email

        try:
            session = await asyncio.to_thread(stripe.checkout.Session.create, **params)
        except stripe.StripeError as e:
            raise PaymentProviderError("stripe", str(e)) from e

        return CheckoutSessionResult(session_id=session.id, checkout_url=session.url)

    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        """Retrieve a Checkout Session and its metadata."""
        try:
            session = await asyncio.to_thread(stripe.checkout.Session.retrieve, session_id)
        except stripe.InvalidRequestError as e:
            if e.code == "resource_missing":
                raise OrderNotFoundError(session_id) from e
            raise PaymentProviderError("stripe", str(e)) from e
        except stripe.StripeError as e:
            raise PaymentProviderError("stripe", str(e)) from e

        if not session:
            raise OrderNotFoundError(session_id)

        return CheckoutSession.from_dict(session.to_dict())

    def construct_webhook_event(self, payload: bytes, signature: str | None) -> WebhookEvent:
        """
        Verify a Stripe webhook and decode it.

        Uses the Stripe-Signature header format.
        """
        if not signature:
            raise WebhookVerificationError("No stripe-signature header value was provided.")

        try:
            stripe.Webhook.construct_event(
                payload,
                signature,
                self._settings.stripe_webhook_secret,
            )
        except stripe.SignatureVerificationError as e:
            raise WebhookVerificationError(str(e)) from e
        except ValueError as e:
            raise WebhookVerificationError(f"Invalid payload: {e}") from e

        return WebhookEvent.from_dict(json.loads(payload))

    async def check_connection(self) -> GatewayStatus:
        """Retrieve the account to confirm the secret key works."""
        try:
            await asyncio.to_thread(stripe.Account.retrieve)
        except stripe.StripeError as e:
            logger.warning("Stripe connection check failed", error=str(e))
            return GatewayStatus(connected=False, mode=self.mode, error=str(e))

        return GatewayStatus(connected=True, mode=self.mode)
