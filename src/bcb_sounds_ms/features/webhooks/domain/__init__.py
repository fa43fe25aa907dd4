"""Webhook domain entities."""

from bcb_sounds_ms.features.webhooks.domain.entities import WebhookEvent, WebhookEventType

__all__ = ["WebhookEvent", "WebhookEventType"]
