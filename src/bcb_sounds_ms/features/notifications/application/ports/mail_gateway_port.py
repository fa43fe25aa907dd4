"""Mail gateway port (interface) - Adapter Pattern."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class MailMessage:
    """A rendered email ready for delivery."""

    to: list[str]
    subject: str
    html: str
    text: str
    reply_to: str | None = None
    sender_name: str | None = None
    tags: dict[str, str] = field(default_factory=dict)


class MailGatewayPort(ABC):
    """
    Abstract interface for mail delivery providers.

    Implementations must be safe for concurrent use by simultaneous requests.

    Implementations:
    - ResendMailAdapter
    - MockMailAdapter (for development)
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name."""
        pass

    @abstractmethod
    async def send(self, message: MailMessage) -> str:
        """
        Deliver a message and return the provider's message id.

        Raises MailDeliveryError if the provider rejects the send.
        """
        pass
