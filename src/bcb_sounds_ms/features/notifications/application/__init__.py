"""Notification application services."""

from bcb_sounds_ms.features.notifications.application.dispatcher import (
    NotificationDispatcher,
)

__all__ = ["NotificationDispatcher"]
