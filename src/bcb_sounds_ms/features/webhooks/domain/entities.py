"""Webhook domain entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class WebhookEventType(str, Enum):
    """Provider event types this service reacts to."""

    CHECKOUT_COMPLETED = "checkout.session.completed"
    PAYMENT_FAILED = "payment_intent.payment_failed"
    OTHER = "other"

    @classmethod
    def classify(cls, raw_type: str) -> "WebhookEventType":
        """Map a provider event type string onto the handled set."""
        try:
            return cls(raw_type)
        except ValueError:
            return cls.OTHER


@dataclass
class WebhookEvent:
    """A verified provider event. Only built after signature verification."""

    id: str
    type: str
    data: dict[str, Any] = field(default_factory=dict)
    livemode: bool = False

    @classmethod
    def from_dict(cls, event: dict[str, Any]) -> "WebhookEvent":
        """Build from a decoded Stripe event payload."""
        return cls(
            id=event.get("id", ""),
            type=event.get("type", ""),
            data=(event.get("data") or {}).get("object") or {},
            livemode=bool(event.get("livemode", False)),
        )

    @property
    def kind(self) -> WebhookEventType:
        """Classified event type."""
        return WebhookEventType.classify(self.type)
