"""Payment gateway port (interface) - Adapter Pattern."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bcb_sounds_ms.features.checkout.domain import CheckoutSession
from bcb_sounds_ms.features.webhooks.domain import WebhookEvent


@dataclass
class CheckoutSessionRequest:
    """Request to create a hosted checkout session."""

    amount_minor: int
    currency: str
    product_name: str
    description: str
    success_url: str
    cancel_url: str
    customer_email: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class CheckoutSessionResult:
    """Result from creating a checkout session."""

    session_id: str
    checkout_url: str | None = None


@dataclass
class GatewayStatus:
    """Result of a credentials check against the provider."""

    connected: bool
    mode: str
    error: str | None = None


class PaymentGatewayPort(ABC):
    """
    Abstract interface for payment gateways (Adapter Pattern).

    Implementations:
    - StripePaymentAdapter
    - MockPaymentAdapter (for development)
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name."""
        pass

    @abstractmethod
    async def create_checkout_session(
        self, request: CheckoutSessionRequest
    ) -> CheckoutSessionResult:
        """
        Create a hosted checkout session with the provider.

        Raises PaymentProviderError when the provider rejects the request.
        """
        pass

    @abstractmethod
    async def retrieve_checkout_session(self, session_id: str) -> CheckoutSession:
        """
        Read a checkout session back, metadata included.

        Raises OrderNotFoundError for unknown sessions.
        """
        pass

    @abstractmethod
    def construct_webhook_event(self, payload: bytes, signature: str | None) -> WebhookEvent:
        """
        Verify the signature of an incoming webhook and decode it.

        Raises WebhookVerificationError if the signature or payload is invalid.
        """
        pass

    @abstractmethod
    async def check_connection(self) -> GatewayStatus:
        """Check that the configured credentials are accepted."""
        pass
