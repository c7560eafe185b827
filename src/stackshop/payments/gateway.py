"""
Stripe-backed payment gateway used by checkout.

Every call goes straight to the Stripe API; there is no retry and no
cleanup of objects created before a failure.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import stripe

from ..config import settings
from ..logging import get_logger

logger = get_logger(__name__)


class PaymentConfigurationError(Exception):
    """Raised when checkout is attempted without a Stripe API key."""

    pass


class StripeGateway:
    """Thin async wrapper over the Stripe product, price and checkout APIs."""

    def __init__(self, api_key: str, currency: str = "usd"):
        self.api_key = api_key
        self.currency = currency

    async def create_product(self, name: str, description: str | None, images: list[str]) -> str:
        params: dict[str, Any] = {"name": name, "images": images}
        if description:
            params["description"] = description
        product = await stripe.Product.create_async(api_key=self.api_key, **params)
        return product.id

    async def create_price(self, product_id: str, unit_amount: int) -> str:
        price = await stripe.Price.create_async(
            api_key=self.api_key,
            product=product_id,
            unit_amount=unit_amount,
            currency=self.currency,
        )
        return price.id

    async def create_checkout_session(
        self,
        line_items: list[dict[str, Any]],
        success_url: str,
        cancel_url: str,
    ) -> str:
        session = await stripe.checkout.Session.create_async(
            api_key=self.api_key,
            payment_method_types=["card"],
            line_items=line_items,
            mode="payment",
            success_url=success_url,
            cancel_url=cancel_url,
        )
        logger.info("Checkout session created", session_id=session.id, line_items=len(line_items))
        return session.id


@lru_cache(maxsize=1)
def get_payment_gateway() -> StripeGateway:
    """Build the gateway from settings."""
    if not settings.stripe_secret_key:
        raise PaymentConfigurationError(
            "Stripe secret key is required. Set STACKSHOP_STRIPE_SECRET_KEY or S_KEY."
        )
    return StripeGateway(api_key=settings.stripe_secret_key, currency=settings.checkout_currency)
