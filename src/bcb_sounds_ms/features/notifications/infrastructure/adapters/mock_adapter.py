"""Mock Mail Gateway Adapter - For development and testing."""

import secrets

import structlog

from bcb_sounds_ms.features.notifications.application.ports import (
    MailGatewayPort,
    MailMessage,
)

logger = structlog.get_logger()


class MockMailAdapter(MailGatewayPort):
    """
    Mock mail provider for development and testing.

    Keeps every message in ``outbox`` instead of delivering it.
    """

    def __init__(self) -> None:
        self.outbox: list[MailMessage] = []

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "mock"

    async def send(self, message: MailMessage) -> str:
        """Record a message."""
        message_id = f"mock_msg_{secrets.token_hex(8)}"
        self.outbox.append(message)
        logger.info(
            "Mock email captured",
            subject=message.subject,
            to=message.to,
            message_id=message_id,
        )
        return message_id
