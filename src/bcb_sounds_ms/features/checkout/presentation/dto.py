"""Checkout DTOs for API requests/responses."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bcb_sounds_ms.features.checkout.domain import CheckoutSession, SessionDescriptor
from bcb_sounds_ms.features.discounts.domain import AppliedDiscount
from bcb_sounds_ms.shared.domain.money import to_decimal


class CheckoutSessionCreateRequest(BaseModel):
    """Request to start checkout for a package."""

    # Allow both camelCase (packageType) and snake_case (package_type)
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "packageType": "standard",
                "price": 49.99,
                "discountCode": "BETA50",
                "customerEmail": "jane@example.com",
            }
        },
    )

    package_type: str | None = Field(
        None, alias="packageType", description="Package being ordered"
    )
    price: Decimal | None = Field(None, description="List price in major units")
    discount_code: str | None = Field(
        None, alias="discountCode", description="Optional promotional code"
    )
    customer_email: str | None = Field(
        None, alias="customerEmail", description="Prefills the checkout email"
    )

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Decimal | None:
        """Parse price to Decimal."""
        if v is None or v == "":
            return None
        return to_decimal(v)


class AppliedDiscountResponse(BaseModel):
    """Discount granted on the order."""

    code: str
    amount: float
    description: str

    @classmethod
    def from_entity(cls, discount: AppliedDiscount) -> "AppliedDiscountResponse":
        return cls(
            code=discount.code,
            amount=float(discount.amount),
            description=discount.description,
        )


class CheckoutSessionResponse(BaseModel):
    """Where to send the customer to pay."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    url: str | None = None
    applied_discount: AppliedDiscountResponse | None = Field(None, alias="appliedDiscount")

    @classmethod
    def from_descriptor(cls, descriptor: SessionDescriptor) -> "CheckoutSessionResponse":
        applied = descriptor.applied_discount
        return cls(
            session_id=descriptor.session_id,
            url=descriptor.url,
            applied_discount=AppliedDiscountResponse.from_entity(applied) if applied else None,
        )


class OrderResponse(BaseModel):
    """Order summary for the success page."""

    model_config = ConfigDict(populate_by_name=True)

    customer_email: str | None = Field(None, alias="customerEmail")
    amount_total: float = Field(..., alias="amountTotal")
    package_type: str | None = Field(None, alias="packageType")
    payment_status: str | None = Field(None, alias="paymentStatus")

    @classmethod
    def from_session(cls, session: CheckoutSession) -> "OrderResponse":
        return cls(
            customer_email=session.customer_email,
            amount_total=float(session.amount_paid),
            package_type=session.package_type,
            payment_status=session.payment_status,
        )


class StripeTestResponse(BaseModel):
    """Result of the payment credentials check."""

    status: str
    mode: str | None = None
    message: str
    error: str | None = None
