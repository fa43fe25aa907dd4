"""Checkout use case - Create checkout session."""

from decimal import Decimal

import structlog

from bcb_sounds_ms.features.checkout.application.ports import (
    CheckoutSessionRequest,
    PaymentGatewayPort,
)
from bcb_sounds_ms.features.checkout.domain import (
    NO_DISCOUNT_CODE,
    OrderRequest,
    SessionDescriptor,
    package_description,
    package_display_name,
)
from bcb_sounds_ms.features.discounts.application import DiscountEvaluator
from bcb_sounds_ms.shared.domain.exceptions import ValidationError
from bcb_sounds_ms.shared.domain.money import ZERO, format_money, to_minor_units

logger = structlog.get_logger()

# Largest single charge Stripe accepts in GBP
MAX_PRICE = Decimal("999999.99")


class CreateCheckoutSessionUseCase:
    """
    Use case for creating a checkout session for a package order.

    Applies the discount code, prices the line item in minor units and
    records the order context in session metadata so the webhook handler
    can confirm the order without recomputing anything.
    """

    def __init__(
        self,
        gateway: PaymentGatewayPort,
        evaluator: DiscountEvaluator,
        frontend_url: str,
        currency: str = "gbp",
    ) -> None:
        self._gateway = gateway
        self._evaluator = evaluator
        self._frontend_url = frontend_url.rstrip("/")
        self._currency = currency

    async def execute(self, request: OrderRequest) -> SessionDescriptor:
        """
        Create a checkout session.

        1. Validate package and price
        2. Evaluate the discount code, if any
        3. Create the session with the gateway
        4. Return the redirect URL and the applied discount
        """
        if not request.package_type or request.original_price is None:
            raise ValidationError("Package type and price are required")
        if request.original_price <= ZERO:
            raise ValidationError("Price must be greater than zero")
        if request.original_price > MAX_PRICE:
            raise ValidationError(f"Price must not exceed {format_money(MAX_PRICE)}")

        charge = request.original_price
        applied_discount = None

        if request.discount_code:
            outcome = self._evaluator.evaluate(request.original_price, request.discount_code)
            charge = outcome.final_price
            applied_discount = outcome.applied_code
            if not outcome.valid:
                logger.info("Unknown discount code ignored", code=request.discount_code)

        amount_minor = to_minor_units(charge)
        if amount_minor < 1:
            raise ValidationError("Order total must be at least £0.01")

        result = await self._gateway.create_checkout_session(
            CheckoutSessionRequest(
                amount_minor=amount_minor,
                currency=self._currency,
                product_name=f"BCB Sounds - {package_display_name(request.package_type)}",
                description=package_description(request.package_type),
                success_url=f"{self._frontend_url}/success?session_id={{CHECKOUT_SESSION_ID}}",
                cancel_url=f"{self._frontend_url}/pricing",
                customer_email=request.customer_email or None,
                metadata={
                    "packageType": request.package_type,
                    "originalPrice": str(request.original_price),
                    "discountCode": request.discount_code or NO_DISCOUNT_CODE,
                    "discountAmount": str(applied_discount.amount) if applied_discount else "0",
                },
            )
        )

        logger.info(
            "Checkout session created",
            session_id=result.session_id,
            package_type=request.package_type,
            amount_minor=amount_minor,
            discount_code=applied_discount.code if applied_discount else None,
        )

        return SessionDescriptor(
            session_id=result.session_id,
            url=result.checkout_url,
            applied_discount=applied_discount,
            amount_minor=amount_minor,
        )
