"""Unit tests for checkout session creation and order lookup."""

from decimal import Decimal

import pytest

from bcb_sounds_ms.features.checkout.application.use_cases import (
    CreateCheckoutSessionUseCase,
    GetOrderUseCase,
)
from bcb_sounds_ms.features.checkout.domain import CheckoutSession, OrderRequest
from bcb_sounds_ms.shared.domain.exceptions import OrderNotFoundError, ValidationError

pytestmark = [pytest.mark.unit]


@pytest.fixture
def use_case(payment_gateway, evaluator) -> CreateCheckoutSessionUseCase:
    return CreateCheckoutSessionUseCase(
        gateway=payment_gateway,
        evaluator=evaluator,
        frontend_url="https://bcbsounds.test/",
    )


class TestCreateCheckoutSession:
    async def test_discounted_price_is_charged_in_pence(self, use_case, payment_gateway):
        descriptor = await use_case.execute(
            OrderRequest(package_type="premium", original_price=Decimal("200"), discount_code="FIRST10")
        )

        assert descriptor.amount_minor == 18000
        assert descriptor.applied_discount.code == "FIRST10"
        assert descriptor.applied_discount.amount == Decimal("20.00")

        request = payment_gateway.created_requests[0]
        assert request.amount_minor == 18000
        assert request.currency == "gbp"
        assert request.metadata == {
            "packageType": "premium",
            "originalPrice": "200",
            "discountCode": "FIRST10",
            "discountAmount": "20.00",
        }

    async def test_line_item_and_redirects(self, use_case, payment_gateway):
        descriptor = await use_case.execute(
            OrderRequest(
                package_type="standard",
                original_price=Decimal("49.99"),
                customer_email="jane@example.com",
            )
        )

        request = payment_gateway.created_requests[0]
        assert request.product_name == "BCB Sounds - Standard Package"
        assert request.description.startswith("Standard Package")
        assert request.amount_minor == 4999
        assert request.customer_email == "jane@example.com"
        assert request.success_url == (
            "https://bcbsounds.test/success?session_id={CHECKOUT_SESSION_ID}"
        )
        assert request.cancel_url == "https://bcbsounds.test/pricing"

        assert descriptor.session_id.startswith("cs_mock_")
        assert descriptor.session_id in descriptor.url
        assert descriptor.applied_discount is None

    async def test_no_code_is_recorded_as_none(self, use_case, payment_gateway):
        await use_case.execute(OrderRequest(package_type="basic", original_price=Decimal("19.99")))

        metadata = payment_gateway.created_requests[0].metadata
        assert metadata["discountCode"] == "none"
        assert metadata["discountAmount"] == "0"

    async def test_unknown_code_charges_full_price(self, use_case, payment_gateway):
        descriptor = await use_case.execute(
            OrderRequest(package_type="basic", original_price=Decimal("19.99"), discount_code="BOGUS")
        )

        assert descriptor.applied_discount is None
        assert descriptor.amount_minor == 1999
        assert payment_gateway.created_requests[0].metadata["discountAmount"] == "0"

    async def test_unknown_package_gets_generic_description(self, use_case, payment_gateway):
        await use_case.execute(OrderRequest(package_type="bespoke", original_price=Decimal("500")))

        assert payment_gateway.created_requests[0].description == "Custom AI-generated music"

    @pytest.mark.parametrize(
        "package_type, price",
        [(None, Decimal("49.99")), ("", Decimal("49.99")), ("standard", None)],
    )
    async def test_missing_fields_are_rejected(self, use_case, payment_gateway, package_type, price):
        with pytest.raises(ValidationError, match="Package type and price are required"):
            await use_case.execute(OrderRequest(package_type=package_type, original_price=price))

        assert payment_gateway.created_requests == []

    async def test_non_positive_price_is_rejected(self, use_case, payment_gateway):
        with pytest.raises(ValidationError):
            await use_case.execute(OrderRequest(package_type="basic", original_price=Decimal("0")))

        assert payment_gateway.created_requests == []

    @pytest.mark.parametrize("price", [Decimal("0.001"), Decimal("0.004")])
    async def test_total_rounding_to_zero_pence_is_rejected(self, use_case, payment_gateway, price):
        with pytest.raises(ValidationError, match="at least"):
            await use_case.execute(OrderRequest(package_type="basic", original_price=price))

        assert payment_gateway.created_requests == []

    async def test_price_above_maximum_is_rejected(self, use_case, payment_gateway):
        with pytest.raises(ValidationError, match="must not exceed"):
            await use_case.execute(OrderRequest(package_type="basic", original_price=Decimal("1e400")))

        assert payment_gateway.created_requests == []

    async def test_maximum_price_is_accepted(self, use_case, payment_gateway):
        await use_case.execute(OrderRequest(package_type="basic", original_price=Decimal("999999.99")))

        assert payment_gateway.created_requests[0].amount_minor == 99999999


class TestGetOrder:
    async def test_reads_session_back(self, use_case, payment_gateway):
        descriptor = await use_case.execute(
            OrderRequest(
                package_type="standard",
                original_price=Decimal("49.99"),
                discount_code="BETA50",
                customer_email="jane@example.com",
            )
        )

        session = await GetOrderUseCase(payment_gateway).execute(descriptor.session_id)

        assert session.customer_email == "jane@example.com"
        assert session.amount_total == 2500
        assert session.amount_paid == Decimal("25.00")
        assert session.package_type == "standard"
        assert session.has_discount is True

    async def test_unknown_session(self, payment_gateway):
        with pytest.raises(OrderNotFoundError):
            await GetOrderUseCase(payment_gateway).execute("cs_missing")

    async def test_blank_session_id(self, payment_gateway):
        with pytest.raises(ValidationError):
            await GetOrderUseCase(payment_gateway).execute("  ")


class TestCheckoutSessionFromProvider:
    def test_email_falls_back_to_customer_details(self):
        session = CheckoutSession.from_dict(
            {
                "id": "cs_1",
                "customer_email": None,
                "customer_details": {"email": "buyer@example.com"},
                "amount_total": 4999,
                "metadata": {"packageType": "standard", "originalPrice": 49.99},
            }
        )

        assert session.customer_email == "buyer@example.com"
        assert session.metadata["originalPrice"] == "49.99"
        assert session.discount_code == "none"
        assert session.has_discount is False
