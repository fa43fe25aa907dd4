"""
API tests for checkout, order lookup and the payment credentials check.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from bcb_sounds_ms.features.checkout.application.ports import GatewayStatus
from bcb_sounds_ms.features.discounts.infrastructure import get_discount_evaluator
from bcb_sounds_ms.shared.domain.exceptions import PaymentProviderError

pytestmark = [pytest.mark.api, pytest.mark.asyncio]


class TestCreateCheckoutSession:
    """Tests for POST /api/create-checkout-session."""

    async def test_with_discount(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={
                "packageType": "standard",
                "price": 49.99,
                "discountCode": "beta50",
                "customerEmail": "jane@example.com",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["sessionId"].startswith("cs_mock_")
        assert data["url"].startswith("https://bcbsounds.test/")
        assert data["appliedDiscount"] == {
            "code": "BETA50",
            "amount": 25.0,
            "description": "50% off beta discount",
        }
        assert payment_gateway.created_requests[0].amount_minor == 2500

    async def test_price_as_string(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "premium", "price": "200", "discountCode": "FIRST10"},
        )

        assert response.status_code == 200
        assert payment_gateway.created_requests[0].amount_minor == 18000

    async def test_without_discount(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "basic", "price": 19.99},
        )

        assert response.status_code == 200
        assert response.json()["appliedDiscount"] is None
        assert payment_gateway.created_requests[0].metadata["discountCode"] == "none"

    async def test_missing_price(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session", json={"packageType": "basic"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Package type and price are required"
        assert payment_gateway.created_requests == []

    async def test_non_numeric_price(self, async_client):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "basic", "price": "cheap"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    async def test_sub_penny_price_rejected(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "basic", "price": "0.001"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Order total must be at least £0.01"
        assert payment_gateway.created_requests == []

    async def test_out_of_range_price_rejected(self, async_client, payment_gateway):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "basic", "price": "1e400"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Price must not exceed £999999.99"
        assert payment_gateway.created_requests == []

    @pytest.mark.parametrize("price", ["NaN", "Infinity", "-inf"])
    async def test_non_finite_price_rejected(self, async_client, price):
        response = await async_client.post(
            "/api/create-checkout-session",
            json={"packageType": "basic", "price": price},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    async def test_provider_failure(self, async_client, payment_gateway):
        with patch.object(
            payment_gateway,
            "create_checkout_session",
            AsyncMock(side_effect=PaymentProviderError("stripe", "Your card was declined")),
        ):
            response = await async_client.post(
                "/api/create-checkout-session",
                json={"packageType": "basic", "price": 19.99},
            )

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Payment provider request failed"
        assert data["details"] == "Your card was declined"

    async def test_unexpected_error(self, app):
        broken = MagicMock()
        broken.evaluate.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_discount_evaluator] = lambda: broken

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post(
                "/api/create-checkout-session",
                json={"packageType": "basic", "price": 19.99, "discountCode": "SAVE20"},
            )

        assert response.status_code == 500
        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Internal server error"


class TestGetOrder:
    """Tests for GET /api/order/{session_id}."""

    async def test_get_order(self, async_client):
        created = await async_client.post(
            "/api/create-checkout-session",
            json={
                "packageType": "standard",
                "price": 49.99,
                "discountCode": "BETA50",
                "customerEmail": "jane@example.com",
            },
        )
        session_id = created.json()["sessionId"]

        response = await async_client.get(f"/api/order/{session_id}")

        assert response.status_code == 200
        assert response.json() == {
            "customerEmail": "jane@example.com",
            "amountTotal": 25.0,
            "packageType": "standard",
            "paymentStatus": "unpaid",
        }

    async def test_unknown_order(self, async_client):
        response = await async_client.get("/api/order/cs_does_not_exist")

        assert response.status_code == 404
        assert response.json()["success"] is False


class TestStripeTest:
    """Tests for GET /api/stripe-test."""

    async def test_connected(self, async_client):
        response = await async_client.get("/api/stripe-test")

        assert response.status_code == 200
        assert response.json() == {
            "status": "connected",
            "mode": "mock",
            "message": "Stripe is properly configured",
        }

    async def test_connection_failed(self, async_client, payment_gateway):
        with patch.object(
            payment_gateway,
            "check_connection",
            AsyncMock(return_value=GatewayStatus(connected=False, mode="test", error="Invalid API Key")),
        ):
            response = await async_client.get("/api/stripe-test")

        assert response.status_code == 500
        assert response.json() == {
            "status": "error",
            "message": "Stripe connection failed",
            "error": "Invalid API Key",
        }
