"""Payment processor integration."""

from .gateway import PaymentConfigurationError, StripeGateway, get_payment_gateway

__all__ = ["PaymentConfigurationError", "StripeGateway", "get_payment_gateway"]
