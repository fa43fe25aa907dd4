"""Domain exceptions for the Order Service."""


class OrderServiceError(Exception):
    """Base exception for order service errors."""

    pass


class ValidationError(OrderServiceError):
    """Raised when a request is missing data or carries malformed data.

    The message is safe to echo back to the caller.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.message = message
        self.errors = errors or [message]
        super().__init__(message)


class OrderNotFoundError(OrderServiceError):
    """Raised when a checkout session is not known to the payment provider."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Order session '{session_id}' not found")


class GatewayError(OrderServiceError):
    """Raised when an upstream provider (payment or mail) fails."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.detail = message
        super().__init__(f"Gateway '{provider}' error: {message}")


class PaymentProviderError(GatewayError):
    """Raised when there's an error with the payment provider."""

    pass


class MailDeliveryError(GatewayError):
    """Raised when the mail provider rejects or fails a send."""

    def __init__(self, provider: str, message: str, recipient: str | None = None) -> None:
        self.recipient = recipient
        super().__init__(provider, message)


class WebhookVerificationError(OrderServiceError):
    """Raised when webhook signature verification fails."""

    def __init__(self, reason: str = "Invalid signature") -> None:
        self.reason = reason
        super().__init__(f"Webhook verification failed: {reason}")
