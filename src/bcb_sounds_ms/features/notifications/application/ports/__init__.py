"""Notification application ports."""

from bcb_sounds_ms.features.notifications.application.ports.mail_gateway_port import (
    MailGatewayPort,
    MailMessage,
)

__all__ = ["MailGatewayPort", "MailMessage"]
