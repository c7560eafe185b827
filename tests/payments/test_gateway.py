"""
Unit tests for the Stripe payment gateway
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from stackshop.payments import gateway as gateway_module
from stackshop.payments.gateway import PaymentConfigurationError, StripeGateway


@pytest.fixture
def gateway():
    return StripeGateway(api_key="sk_test_123", currency="usd")


@pytest.mark.asyncio
async def test_create_product(gateway):
    with patch(
        "stripe.Product.create_async", new=AsyncMock(return_value=SimpleNamespace(id="prod_1"))
    ) as create:
        product_id = await gateway.create_product(
            name="Mug", description="Holds coffee", images=["http://localhost:3000/images/mug.jpg"]
        )

    assert product_id == "prod_1"
    create.assert_awaited_once_with(
        api_key="sk_test_123",
        name="Mug",
        description="Holds coffee",
        images=["http://localhost:3000/images/mug.jpg"],
    )


@pytest.mark.asyncio
async def test_create_product_without_description(gateway):
    with patch(
        "stripe.Product.create_async", new=AsyncMock(return_value=SimpleNamespace(id="prod_2"))
    ) as create:
        await gateway.create_product(name="Mug", description=None, images=[])

    assert "description" not in create.await_args.kwargs


@pytest.mark.asyncio
async def test_create_price_uses_currency(gateway):
    with patch(
        "stripe.Price.create_async", new=AsyncMock(return_value=SimpleNamespace(id="price_1"))
    ) as create:
        price_id = await gateway.create_price(product_id="prod_1", unit_amount=1250)

    assert price_id == "price_1"
    create.assert_awaited_once_with(
        api_key="sk_test_123", product="prod_1", unit_amount=1250, currency="usd"
    )


@pytest.mark.asyncio
async def test_create_checkout_session(gateway):
    with patch(
        "stripe.checkout.Session.create_async",
        new=AsyncMock(return_value=SimpleNamespace(id="cs_test_1")),
    ) as create:
        session_id = await gateway.create_checkout_session(
            line_items=[{"price": "price_1", "quantity": 1}],
            success_url="http://localhost:3000/success?session_id={CHECKOUT_SESSION_ID}",
            cancel_url="http://localhost:3000/",
        )

    assert session_id == "cs_test_1"
    kwargs = create.await_args.kwargs
    assert kwargs["mode"] == "payment"
    assert kwargs["payment_method_types"] == ["card"]
    assert kwargs["line_items"] == [{"price": "price_1", "quantity": 1}]


class TestGetPaymentGateway:
    def setup_method(self):
        gateway_module.get_payment_gateway.cache_clear()

    def teardown_method(self):
        gateway_module.get_payment_gateway.cache_clear()

    def test_missing_key(self):
        with patch.object(gateway_module.settings, "stripe_secret_key", None):
            with pytest.raises(PaymentConfigurationError):
                gateway_module.get_payment_gateway()

    def test_builds_from_settings(self):
        with (
            patch.object(gateway_module.settings, "stripe_secret_key", "sk_test_abc"),
            patch.object(gateway_module.settings, "checkout_currency", "eur"),
        ):
            built = gateway_module.get_payment_gateway()

        assert built.api_key == "sk_test_abc"
        assert built.currency == "eur"
