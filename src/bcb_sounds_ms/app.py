"""FastAPI Application for the BCB Sounds order service."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bcb_sounds_ms.shared.core.logging import configure_logging
from bcb_sounds_ms.shared.core.settings import get_settings
from bcb_sounds_ms.shared.presentation.exception_handlers import (
    register_exception_handlers,
)
from bcb_sounds_ms.features.checkout.presentation.router import (
    router as checkout_router,
)
from bcb_sounds_ms.features.contact.presentation.router import (
    router as contact_router,
)
from bcb_sounds_ms.features.webhooks.presentation.router import (
    router as webhooks_router,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    # Startup
    settings = get_settings()
    logger.info(
        "BCB Sounds backend starting",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
        payment_provider=settings.payment_provider,
        mail_provider=settings.mail_provider,
    )

    if not settings.stripe_configured:
        logger.warning(
            "STRIPE_SECRET_KEY is not set, live checkouts are unavailable",
            payment_provider=settings.payment_provider,
        )
    if not settings.stripe_webhook_secret:
        logger.warning(
            "STRIPE_WEBHOOK_SECRET is not set, Stripe webhooks will be rejected",
            payment_provider=settings.payment_provider,
        )
    if not settings.email_configured:
        logger.warning(
            "Mail credentials are missing, emails will not be delivered",
            mail_provider=settings.mail_provider,
        )
    if settings.is_production and "mock" in (settings.payment_provider, settings.mail_provider):
        logger.warning(
            "Mock provider active in production",
            payment_provider=settings.payment_provider,
            mail_provider=settings.mail_provider,
        )

    yield

    # Shutdown
    logger.info("BCB Sounds backend shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title="BCB Sounds Backend",
        description="Order intake for BCB Sounds: checkout, payment webhooks and contact form",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(contact_router, prefix=settings.api_prefix, tags=["Contact"])
    app.include_router(checkout_router, prefix=settings.api_prefix, tags=["Checkout"])
    app.include_router(webhooks_router, prefix=settings.api_prefix, tags=["Webhooks"])

    # Health endpoints
    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {"service": "BCB Sounds Backend", "status": "running"}

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {
            "status": "OK",
            "message": "BCB Sounds Backend is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "emailConfigured": settings.email_configured,
            "stripeConfigured": settings.stripe_configured,
        }

    @app.get("/api/test", tags=["Health"])
    async def api_test() -> dict[str, str]:
        """Smoke test endpoint."""
        return {"message": "API is working!", "environment": settings.environment}

    return app


app = create_app()
