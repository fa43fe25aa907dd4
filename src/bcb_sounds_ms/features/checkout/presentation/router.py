"""Checkout API router."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from bcb_sounds_ms.features.checkout.application.ports import PaymentGatewayPort
from bcb_sounds_ms.features.checkout.application.use_cases import (
    CreateCheckoutSessionUseCase,
    GetOrderUseCase,
)
from bcb_sounds_ms.features.checkout.domain import OrderRequest
from bcb_sounds_ms.features.checkout.infrastructure.provider_factory import (
    get_payment_gateway,
)
from bcb_sounds_ms.features.checkout.presentation.dto import (
    CheckoutSessionCreateRequest,
    CheckoutSessionResponse,
    OrderResponse,
    StripeTestResponse,
)
from bcb_sounds_ms.features.discounts.application import DiscountEvaluator
from bcb_sounds_ms.features.discounts.infrastructure import get_discount_evaluator
from bcb_sounds_ms.shared.core.settings import Settings, get_settings

logger = structlog.get_logger()

router = APIRouter()


@router.get(
    "/stripe-test",
    response_model=StripeTestResponse,
    response_model_exclude_none=True,
    summary="Check payment provider credentials",
    responses={500: {"model": StripeTestResponse}},
)
async def stripe_test(
    gateway: Annotated[PaymentGatewayPort, Depends(get_payment_gateway)],
) -> StripeTestResponse | JSONResponse:
    """Make a lightweight authenticated call to the payment provider."""
    status = await gateway.check_connection()

    if not status.connected:
        logger.error("Payment provider connection failed", error=status.error)
        return JSONResponse(
            status_code=500,
            content=StripeTestResponse(
                status="error",
                message="Stripe connection failed",
                error=status.error,
            ).model_dump(exclude_none=True),
        )

    return StripeTestResponse(
        status="connected",
        mode=status.mode,
        message="Stripe is properly configured",
    )


@router.post(
    "/create-checkout-session",
    response_model=CheckoutSessionResponse,
    summary="Create a checkout session",
    description="""
    Create a hosted checkout session for a package order.

    - Applies `discountCode` when it is a known code, ignores it otherwise
    - Charges in GBP minor units
    - Returns the checkout URL to redirect the customer to
    """,
)
async def create_checkout_session(
    request: CheckoutSessionCreateRequest,
    gateway: Annotated[PaymentGatewayPort, Depends(get_payment_gateway)],
    evaluator: Annotated[DiscountEvaluator, Depends(get_discount_evaluator)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CheckoutSessionResponse:
    """Create a checkout session."""
    use_case = CreateCheckoutSessionUseCase(
        gateway=gateway,
        evaluator=evaluator,
        frontend_url=settings.frontend_url,
        currency=settings.currency,
    )

    descriptor = await use_case.execute(
        OrderRequest(
            package_type=request.package_type,
            original_price=request.price,
            discount_code=request.discount_code,
            customer_email=request.customer_email,
        )
    )

    return CheckoutSessionResponse.from_descriptor(descriptor)


@router.get(
    "/order/{session_id}",
    response_model=OrderResponse,
    summary="Get order details",
    description="Read a completed checkout back for the success page.",
)
async def get_order(
    session_id: str,
    gateway: Annotated[PaymentGatewayPort, Depends(get_payment_gateway)],
) -> OrderResponse:
    """Get order details by checkout session ID."""
    session = await GetOrderUseCase(gateway).execute(session_id)
    return OrderResponse.from_session(session)
