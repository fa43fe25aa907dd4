"""Mail gateway and dispatcher factories - Dependency injection."""

from functools import lru_cache

from bcb_sounds_ms.features.notifications.application import NotificationDispatcher
from bcb_sounds_ms.features.notifications.application.ports import MailGatewayPort
from bcb_sounds_ms.features.notifications.infrastructure.adapters import (
    MockMailAdapter,
    ResendMailAdapter,
)
from bcb_sounds_ms.shared.core.settings import get_settings


@lru_cache
def get_mail_gateway() -> MailGatewayPort:
    """Get the mail gateway based on configuration."""
    settings = get_settings()

    match settings.mail_provider:
        case "resend":
            return ResendMailAdapter()
        case _:
            return MockMailAdapter()


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """Get the dispatcher wired to the configured mail gateway."""
    settings = get_settings()
    return NotificationDispatcher(
        gateway=get_mail_gateway(),
        business_email=settings.business_email or settings.mail_from_address,
        frontend_url=settings.frontend_url,
    )
