"""Webhook reconciler - Verifies provider events and fans out notifications."""

from dataclasses import dataclass, field

import structlog
from structlog.typing import FilteringBoundLogger

from bcb_sounds_ms.features.checkout.application.ports import PaymentGatewayPort
from bcb_sounds_ms.features.checkout.domain import CheckoutSession
from bcb_sounds_ms.features.notifications.application import NotificationDispatcher
from bcb_sounds_ms.features.webhooks.domain import WebhookEvent, WebhookEventType

logger = structlog.get_logger()


@dataclass
class WebhookReceipt:
    """What happened to one delivery. The event is acknowledged regardless."""

    event_id: str
    event_type: WebhookEventType
    notifications_sent: list[str] = field(default_factory=list)
    notifications_failed: list[str] = field(default_factory=list)


class WebhookReconciler:
    """
    Handles a single signed webhook delivery.

    Unverified -> Verified -> Acknowledged. Signature failures raise
    ``WebhookVerificationError`` before anything is dispatched. Once the
    event is verified, notification failures are logged and never propagate,
    so the provider does not retry a payment that already completed.

    Deliveries are not deduplicated: a provider retry of the same event
    sends the emails again.
    """

    def __init__(
        self,
        gateway: PaymentGatewayPort,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._gateway = gateway
        self._dispatcher = dispatcher

    async def handle(self, payload: bytes, signature: str | None) -> WebhookReceipt:
        """Verify, classify and process one delivery."""
        event = self._gateway.construct_webhook_event(payload, signature)
        receipt = WebhookReceipt(event_id=event.id, event_type=event.kind)
        log = logger.bind(event_id=event.id, event_type=event.type, livemode=event.livemode)

        match event.kind:
            case WebhookEventType.CHECKOUT_COMPLETED:
                await self._handle_checkout_completed(event, receipt, log)
            case WebhookEventType.PAYMENT_FAILED:
                log.warning("Payment failed", payment_intent_id=event.data.get("id"))
            case _:
                log.info("Unhandled event type")

        return receipt

    async def _handle_checkout_completed(
        self,
        event: WebhookEvent,
        receipt: WebhookReceipt,
        log: FilteringBoundLogger,
    ) -> None:
        session = CheckoutSession.from_dict(event.data)
        log = log.bind(session_id=session.id)
        log.info(
            "Payment successful",
            package_type=session.package_type,
            amount_total=session.amount_total,
        )

        sends = (
            ("order_confirmation", self._dispatcher.send_order_confirmation),
            ("admin_order_alert", self._dispatcher.send_admin_notification),
        )
        for kind, send in sends:
            try:
                await send(session)
            except Exception:
                # Non-fatal: the payment is complete, so the event is still acknowledged
                log.exception("Notification failed", kind=kind)
                receipt.notifications_failed.append(kind)
            else:
                receipt.notifications_sent.append(kind)

        if receipt.notifications_failed:
            log.warning(
                "Order notifications incomplete",
                sent=receipt.notifications_sent,
                failed=receipt.notifications_failed,
            )
        else:
            log.info("Confirmation emails sent successfully")
