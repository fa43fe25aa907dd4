"""Exception handlers for the FastAPI application."""

import traceback

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bcb_sounds_ms.shared.core.settings import get_settings
from bcb_sounds_ms.shared.domain.exceptions import (
    GatewayError,
    MailDeliveryError,
    OrderNotFoundError,
    OrderServiceError,
    PaymentProviderError,
    ValidationError,
    WebhookVerificationError,
)
from bcb_sounds_ms.shared.presentation.api_response import APIResponse

logger = structlog.get_logger()


def _details(detail: str) -> str | None:
    """Upstream error text is only echoed outside production."""
    return None if get_settings().is_production else detail


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=APIResponse.error(exc.message, errors=exc.errors).to_content(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=APIResponse.error("Invalid request body", errors=errors).to_content(),
        )

    @app.exception_handler(WebhookVerificationError)
    async def webhook_verification_handler(
        request: Request, exc: WebhookVerificationError
    ) -> PlainTextResponse:
        return PlainTextResponse(status_code=400, content=f"Webhook Error: {exc.reason}")

    @app.exception_handler(OrderNotFoundError)
    async def order_not_found_handler(
        request: Request, exc: OrderNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=APIResponse.error(str(exc), errors=["Session not found"]).to_content(),
        )

    @app.exception_handler(PaymentProviderError)
    async def payment_provider_handler(
        request: Request, exc: PaymentProviderError
    ) -> JSONResponse:
        logger.error("Payment provider error", path=request.url.path, error=exc.detail)
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Payment provider request failed",
                errors=["Payment provider error"],
                details=_details(exc.detail),
            ).to_content(),
        )

    @app.exception_handler(MailDeliveryError)
    async def mail_delivery_handler(
        request: Request, exc: MailDeliveryError
    ) -> JSONResponse:
        logger.error(
            "Mail delivery error",
            path=request.url.path,
            recipient=exc.recipient,
            error=exc.detail,
        )
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Failed to send message. Please try again later.",
                errors=["Mail delivery error"],
                details=_details(exc.detail),
            ).to_content(),
        )

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(
        request: Request, exc: GatewayError
    ) -> JSONResponse:
        logger.error("Gateway error", path=request.url.path, provider=exc.provider)
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Upstream service error", details=_details(exc.detail)
            ).to_content(),
        )

    @app.exception_handler(OrderServiceError)
    async def order_service_error_handler(
        request: Request, exc: OrderServiceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=APIResponse.error(str(exc), errors=[str(exc)]).to_content(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        message = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=APIResponse.error(message).to_content(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error", path=request.url.path)
        stack = None
        if not get_settings().is_production:
            stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Internal server error", errors=[str(exc)], details=stack
            ).to_content(),
        )
