"""
Configuration management for the Stackshop backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    mongodb_url: str = "mongodb://localhost:27017"
    database_name: str = "stackshop"
    database_timeout_ms: int = 5000

    # Auth
    jwt_secret: str = "mysecretsshhhhh"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "stackshop"
    jwt_audience: str = "stackshop-api"
    token_expiry_hours: int = 2
    password_hash_iterations: int = 260_000

    # Payments
    stripe_secret_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STACKSHOP_STRIPE_SECRET_KEY", "S_KEY"),
    )
    checkout_currency: str = "usd"

    # Frontend Integration
    # Used as the checkout origin when a request carries no referer header
    frontend_base_url: str | None = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "STACKSHOP_"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        environment=settings.environment,
        database_name=settings.database_name,
        payments_configured=settings.stripe_secret_key is not None,
    )
