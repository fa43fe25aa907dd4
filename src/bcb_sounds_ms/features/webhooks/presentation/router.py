"""Webhook API router - Handles incoming webhooks from the payment provider."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request

from bcb_sounds_ms.features.checkout.application.ports import PaymentGatewayPort
from bcb_sounds_ms.features.checkout.infrastructure import get_payment_gateway
from bcb_sounds_ms.features.notifications.application import NotificationDispatcher
from bcb_sounds_ms.features.notifications.infrastructure import get_notification_dispatcher
from bcb_sounds_ms.features.webhooks.application import WebhookReconciler

router = APIRouter()


def get_reconciler(
    gateway: Annotated[PaymentGatewayPort, Depends(get_payment_gateway)],
    dispatcher: Annotated[NotificationDispatcher, Depends(get_notification_dispatcher)],
) -> WebhookReconciler:
    """Dependency for getting the webhook reconciler."""
    return WebhookReconciler(gateway, dispatcher)


@router.post(
    "/webhook/stripe",
    summary="Stripe Webhook",
    description="""
    Endpoint for receiving webhooks from Stripe.

    - Validates signature using the raw body and `Stripe-Signature` header
    - On `checkout.session.completed`, emails the customer and the business
    - Always acknowledges a verified event, even if emails fail

    **Important**: Configure this URL in Stripe Dashboard.
    """,
)
async def stripe_webhook(
    request: Request,
    reconciler: Annotated[WebhookReconciler, Depends(get_reconciler)],
    stripe_signature: Annotated[str | None, Header(alias="Stripe-Signature")] = None,
) -> dict[str, bool]:
    """Handle Stripe webhooks."""
    # Signature is computed over the exact bytes received
    payload = await request.body()

    await reconciler.handle(payload, stripe_signature)

    return {"received": True}
