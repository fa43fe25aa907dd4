"""Webhook application services."""

from bcb_sounds_ms.features.webhooks.application.reconciler import (
    WebhookReceipt,
    WebhookReconciler,
)

__all__ = ["WebhookReceipt", "WebhookReconciler"]
