"""
Test Configuration and Fixtures

Shared fixtures for the unit and API suites. Every gateway is an in-memory
fake injected through FastAPI dependency overrides, so no test talks to
Stripe or a mail provider.
"""

import json
import os
from typing import Any, AsyncGenerator, Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing app.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PAYMENT_PROVIDER", "mock")
os.environ.setdefault("MAIL_PROVIDER", "mock")
os.environ.setdefault("BUSINESS_EMAIL", "orders@bcbsounds.test")
os.environ.setdefault("FRONTEND_URL", "https://bcbsounds.test")
os.environ.setdefault("MOCK_WEBHOOK_SECRET", "whsec_test_secret")
os.environ.setdefault("LOG_LEVEL", "warning")

from bcb_sounds_ms.features.checkout.infrastructure.adapters import MockPaymentAdapter  # noqa: E402
from bcb_sounds_ms.features.discounts.application import DiscountEvaluator  # noqa: E402
from bcb_sounds_ms.features.notifications.application import NotificationDispatcher  # noqa: E402
from bcb_sounds_ms.features.notifications.application.ports import (  # noqa: E402
    MailGatewayPort,
    MailMessage,
)
from bcb_sounds_ms.features.notifications.infrastructure.adapters import MockMailAdapter  # noqa: E402
from bcb_sounds_ms.shared.domain.exceptions import MailDeliveryError  # noqa: E402

BUSINESS_EMAIL = "orders@bcbsounds.test"
FRONTEND_URL = "https://bcbsounds.test"
WEBHOOK_SECRET = "whsec_test_secret"


class FailingMailAdapter(MailGatewayPort):
    """Mail gateway that rejects every send."""

    def __init__(self) -> None:
        self.attempts: list[MailMessage] = []

    @property
    def provider_name(self) -> str:
        return "failing"

    async def send(self, message: MailMessage) -> str:
        self.attempts.append(message)
        raise MailDeliveryError("failing", "SMTP relay unavailable", recipient=message.to[0])


# =============================================================================
# GATEWAY FIXTURES
# =============================================================================


@pytest.fixture
def payment_gateway() -> MockPaymentAdapter:
    """In-memory payment gateway."""
    return MockPaymentAdapter(webhook_secret=WEBHOOK_SECRET, frontend_url=FRONTEND_URL)


@pytest.fixture
def mail_gateway() -> MockMailAdapter:
    """Mail gateway that keeps an outbox."""
    return MockMailAdapter()


@pytest.fixture
def failing_mail_gateway() -> FailingMailAdapter:
    """Mail gateway that always fails."""
    return FailingMailAdapter()


@pytest.fixture
def dispatcher(mail_gateway) -> NotificationDispatcher:
    """Dispatcher wired to the outbox gateway."""
    return NotificationDispatcher(
        gateway=mail_gateway,
        business_email=BUSINESS_EMAIL,
        frontend_url=FRONTEND_URL,
    )


@pytest.fixture
def failing_dispatcher(failing_mail_gateway) -> NotificationDispatcher:
    """Dispatcher whose every send fails."""
    return NotificationDispatcher(
        gateway=failing_mail_gateway,
        business_email=BUSINESS_EMAIL,
        frontend_url=FRONTEND_URL,
    )


@pytest.fixture
def evaluator() -> DiscountEvaluator:
    """Evaluator over the built-in code table."""
    return DiscountEvaluator()


@pytest.fixture
def sign_event(payment_gateway) -> Callable[[dict[str, Any]], tuple[bytes, str]]:
    """Serialize an event and sign it the way the provider would."""

    def _sign(event: dict[str, Any]) -> tuple[bytes, str]:
        payload = json.dumps(event).encode()
        return payload, payment_gateway.generate_webhook_signature(payload)

    return _sign


# =============================================================================
# APP FIXTURES
# =============================================================================


@pytest.fixture
def app(payment_gateway, dispatcher, evaluator):
    """Create FastAPI application for testing with gateway overrides."""
    from bcb_sounds_ms.app import app as fastapi_app
    from bcb_sounds_ms.features.checkout.infrastructure import get_payment_gateway
    from bcb_sounds_ms.features.discounts.infrastructure import get_discount_evaluator
    from bcb_sounds_ms.features.notifications.infrastructure import get_notification_dispatcher

    fastapi_app.dependency_overrides[get_payment_gateway] = lambda: payment_gateway
    fastapi_app.dependency_overrides[get_notification_dispatcher] = lambda: dispatcher
    fastapi_app.dependency_overrides[get_discount_evaluator] = lambda: evaluator

    yield fastapi_app

    # Clean up
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with gateways overridden."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
