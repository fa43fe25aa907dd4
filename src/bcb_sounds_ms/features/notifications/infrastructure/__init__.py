"""Notification infrastructure module."""

from bcb_sounds_ms.features.notifications.infrastructure.adapters import (
    MockMailAdapter,
    ResendMailAdapter,
)
from bcb_sounds_ms.features.notifications.infrastructure.mail_factory import (
    get_mail_gateway,
    get_notification_dispatcher,
)

__all__ = [
    "MockMailAdapter",
    "ResendMailAdapter",
    "get_mail_gateway",
    "get_notification_dispatcher",
]
