"""Mock Payment Gateway Adapter - For development and testing."""

import hashlib
import hmac
import json
import secrets
import time
from typing import Any

import structlog

from bcb_sounds_ms.features.checkout.application.ports import (
    CheckoutSessionRequest,
    CheckoutSessionResult,
    GatewayStatus,
    PaymentGatewayPort,
)
from bcb_sounds_ms.features.checkout.domain import CheckoutSession, PaymentStatus
from bcb_sounds_ms.features.webhooks.domain import WebhookEvent, WebhookEventType
from bcb_sounds_ms.shared.core.settings import get_settings
from bcb_sounds_ms.shared.domain.exceptions import (
    OrderNotFoundError,
    WebhookVerificationError,
)

logger = structlog.get_logger()

# Signatures older than this are rejected, same as Stripe's default tolerance
SIGNATURE_TOLERANCE_SECONDS = 300


class MockPaymentAdapter(PaymentGatewayPort):
    """
    Mock payment gateway for development and testing.

    Simulates Stripe Checkout without external API calls. Webhooks use the
    same ``t=<timestamp>,v1=<signature>`` scheme as Stripe, signed with
    ``MOCK_WEBHOOK_SECRET``.
    """

    def __init__(self, webhook_secret: str | None = None, frontend_url: str | None = None) -> None:
        settings = get_settings()
        self._webhook_secret = webhook_secret or settings.mock_webhook_secret
        self._frontend_url = (frontend_url or settings.frontend_url).rstrip("/")
        self._sessions: dict[str, CheckoutSession] = {}
        self.created_requests: list[CheckoutSessionRequest] = []

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "mock"

    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSessionResult:
        """
        Create a mock checkout session.

        Returns a fake checkout URL that can be used for testing.
        """
        session_id = f"cs_mock_{secrets.token_hex(12)}"
        checkout_url = f"{self._frontend_url}/payment/mock-checkout?session_id={session_id}"

        self.created_requests.append(request)
        self._sessions[session_id] = CheckoutSession(
            id=session_id,
            customer_email=request.customer_email,
            amount_total=request.amount_minor,
            currency=request.currency,
            payment_status=PaymentStatus.UNPAID.value,
            metadata=dict(request.metadata),
        )

        logger.debug("Mock checkout session created", session_id=session_id)
        return CheckoutSessionResult(session_id=session_id, checkout_url=checkout_url)

    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        """Retrieve a mock session."""
        session = self._sessions.get(session_id)
        if session is None:
            raise OrderNotFoundError(session_id)
        return session

    def construct_webhook_event(self, payload: bytes, signature: str | None) -> WebhookEvent:
        """
        Verify mock webhook signature and decode the event.

        Expected format: t=<timestamp>,v1=<signature>
        """
        if not signature:
            raise WebhookVerificationError("No stripe-signature header value was provided.")

        try:
            parts = dict(part.split("=", 1) for part in signature.split(","))
        except ValueError as e:
            raise WebhookVerificationError("Unable to extract timestamp and signatures from header") from e

        timestamp = parts.get("t", "")
        provided_sig = parts.get("v1", "")
        if not timestamp or not provided_sig:
            raise WebhookVerificationError("Unable to extract timestamp and signatures from header")

        try:
            ts = int(timestamp)
        except ValueError as e:
            raise WebhookVerificationError("Invalid timestamp in signature header") from e
        if abs(int(time.time()) - ts) > SIGNATURE_TOLERANCE_SECONDS:
            raise WebhookVerificationError("Timestamp outside the tolerance zone")

        expected_sig = self._sign(timestamp, payload)
        # Timing-safe comparison
        if not hmac.compare_digest(expected_sig, provided_sig):
            raise WebhookVerificationError(
                "No signatures found matching the expected signature for payload"
            )

        try:
            return WebhookEvent.from_dict(json.loads(payload))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise WebhookVerificationError(f"Invalid payload: {e}") from e

    async def check_connection(self) -> GatewayStatus:
        """The mock gateway is always reachable."""
        return GatewayStatus(connected=True, mode="mock")

    def generate_webhook_signature(self, payload: str | bytes, timestamp: int | None = None) -> str:
        """
        Generate a webhook signature for testing.

        Useful for simulating webhook calls in development.
        """
        ts = str(timestamp if timestamp is not None else int(time.time()))
        raw = payload.encode() if isinstance(payload, str) else payload
        return f"t={ts},v1={self._sign(ts, raw)}"

    def simulate_payment_success(self, session_id: str) -> dict[str, Any]:
        """Mark a session paid and build the matching completed event (for testing)."""
        session = self._sessions.get(session_id)
        if session is None:
            raise OrderNotFoundError(session_id)
        session.payment_status = PaymentStatus.PAID.value

        return {
            "id": f"evt_mock_{secrets.token_hex(8)}",
            "type": WebhookEventType.CHECKOUT_COMPLETED.value,
            "livemode": False,
            "data": {
                "object": {
                    "id": session.id,
                    "object": "checkout.session",
                    "customer_email": session.customer_email,
                    "amount_total": session.amount_total,
                    "currency": session.currency,
                    "payment_status": session.payment_status,
                    "metadata": dict(session.metadata),
                }
            },
        }

    def _sign(self, timestamp: str, payload: bytes) -> str:
        signed_payload = f"{timestamp}.".encode() + payload
        return hmac.new(
            self._webhook_secret.encode(),
            signed_payload,
            hashlib.sha256,
        ).hexdigest()
