"""Notification dispatcher - Formats and sends transactional emails."""

import structlog

from bcb_sounds_ms.features.checkout.domain import CheckoutSession
from bcb_sounds_ms.features.contact.domain import ContactSubmission
from bcb_sounds_ms.features.notifications.application import templates
from bcb_sounds_ms.features.notifications.application.ports import (
    MailGatewayPort,
    MailMessage,
)
from bcb_sounds_ms.shared.domain.exceptions import MailDeliveryError, ValidationError

logger = structlog.get_logger()


class NotificationDispatcher:
    """
    Sends the four message kinds of the order and contact flows.

    Every operation makes exactly one call to the mail gateway and raises
    ``MailDeliveryError`` when it fails. Whether that is fatal is up to the
    caller.
    """

    def __init__(
        self,
        gateway: MailGatewayPort,
        business_email: str,
        frontend_url: str,
    ) -> None:
        self._gateway = gateway
        self._business_email = business_email
        self._frontend_url = frontend_url

    async def send_order_confirmation(self, session: CheckoutSession) -> str:
        """Confirm a paid order to the customer."""
        missing = [
            name
            for name, value in (
                ("customer_email", session.customer_email),
                ("metadata.packageType", session.metadata.get("packageType")),
                ("metadata.originalPrice", session.metadata.get("originalPrice")),
                ("amount_total", session.amount_total),
            )
            if value in (None, "")
        ]
        if missing:
            raise ValidationError(
                f"Checkout session {session.id} is missing {', '.join(missing)}",
                errors=missing,
            )

        email = templates.order_confirmation(session)
        return await self._deliver(
            MailMessage(
                to=[session.customer_email],
                subject=email.subject,
                html=email.html,
                text=email.text,
                tags={"kind": "order_confirmation"},
            ),
            kind="order_confirmation",
        )

    async def send_admin_notification(self, session: CheckoutSession) -> str:
        """Alert the business inbox about a new order."""
        email = templates.admin_order_alert(session)
        return await self._deliver(
            MailMessage(
                to=[self._require_business_email()],
                subject=email.subject,
                html=email.html,
                text=email.text,
                sender_name="BCB Sounds System",
                tags={"kind": "admin_order_alert"},
            ),
            kind="admin_order_alert",
        )

    async def send_contact_form_email(self, submission: ContactSubmission) -> str:
        """Relay a contact submission to the business inbox."""
        email = templates.contact_relay(submission)
        return await self._deliver(
            MailMessage(
                to=[self._require_business_email()],
                subject=email.subject,
                html=email.html,
                text=email.text,
                reply_to=submission.email,
                sender_name="BCB Sounds Contact Form",
                tags={"kind": "contact_relay"},
            ),
            kind="contact_relay",
        )

    async def send_contact_auto_reply(self, submission: ContactSubmission) -> str:
        """Acknowledge a contact submission to the sender."""
        email = templates.contact_auto_reply(submission, self._frontend_url)
        return await self._deliver(
            MailMessage(
                to=[submission.email],
                subject=email.subject,
                html=email.html,
                text=email.text,
                tags={"kind": "contact_auto_reply"},
            ),
            kind="contact_auto_reply",
        )

    def _require_business_email(self) -> str:
        if not self._business_email:
            raise MailDeliveryError(
                self._gateway.provider_name, "Business email address is not configured"
            )
        return self._business_email

    async def _deliver(self, message: MailMessage, kind: str) -> str:
        message_id = await self._gateway.send(message)
        logger.info("Notification sent", kind=kind, message_id=message_id)
        return message_id
