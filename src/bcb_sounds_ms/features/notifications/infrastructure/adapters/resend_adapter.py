"""Resend Mail Gateway Adapter."""

import httpx
import structlog

from bcb_sounds_ms.features.notifications.application.ports import (
    MailGatewayPort,
    MailMessage,
)
from bcb_sounds_ms.shared.core.settings import Settings, get_settings
from bcb_sounds_ms.shared.domain.exceptions import MailDeliveryError

logger = structlog.get_logger()


class ResendMailAdapter(MailGatewayPort):
    """
    Resend HTTP API adapter.

    Each send opens its own short-lived client, so concurrent requests never
    share a connection.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "resend"

    async def send(self, message: MailMessage) -> str:
        """Send one message through the Resend API."""
        settings = self._settings

        if not settings.resend_api_key or not settings.mail_from_address:
            raise MailDeliveryError(
                "resend", "Mail provider is not configured", recipient=", ".join(message.to)
            )

        sender_name = message.sender_name or settings.mail_from_name
        payload: dict[str, object] = {
            "from": f"{sender_name} <{settings.mail_from_address}>",
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
            "text": message.text,
        }
        if message.reply_to:
            payload["reply_to"] = message.reply_to
        if message.tags:
            payload["tags"] = [{"name": key, "value": value} for key, value in message.tags.items()]

        url = settings.resend_api_url.rstrip("/") + "/emails"
        headers = {
            "Authorization": f"Bearer {settings.resend_api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                timeout=settings.gateway_timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as e:
            raise MailDeliveryError(
                "resend", "Request timeout", recipient=", ".join(message.to)
            ) from e
        except httpx.RequestError as e:
            raise MailDeliveryError("resend", str(e), recipient=", ".join(message.to)) from e

        if response.status_code >= 400:
            logger.warning(
                "Resend email failed",
                subject=message.subject,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise MailDeliveryError(
                "resend",
                f"HTTP {response.status_code}: {response.text[:200]}",
                recipient=", ".join(message.to),
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None
        message_id = payload.get("id", "") if isinstance(payload, dict) else ""
        logger.info(
            "Resend email sent",
            subject=message.subject,
            recipient_count=len(message.to),
            message_id=message_id,
        )
        return message_id
