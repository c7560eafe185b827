from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import strawberry

from ...config import settings
from ...logging import get_logger
from ...payments.gateway import get_payment_gateway
from ..access_control import get_request_header
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.checkout import Checkout

logger = get_logger(__name__)


class CheckoutError(Exception):
    """Raised when a checkout request cannot be turned into a session."""

    pass


def resolve_origin(referer: str | None) -> str:
    """Return ``scheme://host[:port]`` of the page that started checkout."""
    if referer:
        parts = urlsplit(referer)
        if parts.scheme and parts.netloc:
            return f"{parts.scheme}://{parts.netloc}"
    if settings.frontend_base_url:
        return settings.frontend_base_url.rstrip("/")
    raise CheckoutError("Cannot determine checkout origin: no referer header")


async def checkout(info: strawberry.Info, products: list[strawberry.ID]) -> Checkout:
    """
    Create a payment checkout session for a list of products.

    Each listed product becomes its own catalog product, price and line item
    (quantity 1) at the payment processor; list a product twice to buy two.
    Nothing is written to the store.
    """
    from ..types.checkout import Checkout as CheckoutType

    if not products:
        raise CheckoutError("No products to check out")

    origin = resolve_origin(get_request_header(info, "referer"))
    product_ids = [to_object_id(product_id) for product_id in products]

    documents = await info.context["loaders"].product_loader.load_many(product_ids)
    missing = [str(oid) for oid, doc in zip(product_ids, documents, strict=True) if doc is None]
    if missing:
        raise CheckoutError(f"Product not found: {', '.join(missing)}")

    gateway = get_payment_gateway()
    line_items = []
    try:
        for doc in documents:
            product_id = await gateway.create_product(
                name=doc["name"],
                description=doc.get("description"),
                images=[f"{origin}/images/{doc.get('image')}"],
            )
            price_id = await gateway.create_price(
                product_id=product_id,
                unit_amount=round(float(doc["price"]) * 100),
            )
            line_items.append({"price": price_id, "quantity": 1})

        session_id = await gateway.create_checkout_session(
            line_items=line_items,
            success_url=f"{origin}/success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{origin}/",
        )
    except Exception as e:
        logger.error("Checkout failed", error=str(e), line_items_created=len(line_items))
        raise

    return CheckoutType(session=session_id)
