"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False
    environment: Literal["development", "test", "staging", "production"] = "development"
    api_prefix: str = "/api"

    # Logging
    log_level: str = "info"
    log_format: Literal["console", "json"] = "console"

    # Payment Provider
    payment_provider: Literal["stripe", "mock"] = "mock"
    currency: str = "gbp"

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""

    # Mock Provider
    mock_webhook_secret: str = "whsec_mock_development_secret"

    # Mail Provider
    mail_provider: Literal["resend", "mock"] = "mock"
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com"
    mail_from_address: str = ""
    mail_from_name: str = "BCB Sounds"
    business_email: str = ""

    # Outbound calls to Stripe and the mail provider
    gateway_timeout_seconds: float = 10.0

    # URLs
    frontend_url: str = "http://localhost:5173"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "https://bcb-sounds-site.up.railway.app",
    ]

    # Discount table override, e.g.
    # DISCOUNT_CODES='{"SPRING15": {"kind": "percentage", "value": 15, "description": "15% off"}}'
    discount_codes: dict[str, dict[str, Any]] | None = None

    @property
    def is_production(self) -> bool:
        """Whether error details must be hidden from API responses."""
        return self.environment == "production"

    @property
    def stripe_configured(self) -> bool:
        """Whether live payment credentials are present."""
        return bool(self.stripe_secret_key)

    @property
    def email_configured(self) -> bool:
        """Whether outbound mail credentials are present."""
        return bool(self.resend_api_key and self.mail_from_address)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
