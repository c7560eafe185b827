from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import strawberry
from bson import ObjectId

from ...database.collections import USERS
from ...database.connection import get_database
from ...logging import get_logger
from ..access_control import require_auth
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.order import Order

logger = get_logger(__name__)


async def resolve_order(info: strawberry.Info, id: strawberry.ID) -> Order | None:
    """Resolve one of the current user's orders."""
    from ..types.order import Order as OrderType

    auth_context = await require_auth(info)
    order_oid = to_object_id(id)

    user = await get_database()[USERS].find_one({"_id": auth_context.user_id}, {"orders": 1})
    if user is None:
        return None

    for doc in user.get("orders", []):
        if doc["_id"] == order_oid:
            return OrderType.from_document(doc)

    logger.info("Order not found", order_id=str(id))
    return None


async def add_order(info: strawberry.Info, products: list[strawberry.ID]) -> Order:
    """Append a new order for ``products`` to the current user."""
    from ..types.order import Order as OrderType

    auth_context = await require_auth(info)

    order = {
        "_id": ObjectId(),
        "purchaseDate": datetime.now(UTC),
        "products": [to_object_id(product_id) for product_id in products],
    }
    await get_database()[USERS].update_one(
        {"_id": auth_context.user_id}, {"$push": {"orders": order}}
    )

    logger.info("Order added", order_id=str(order["_id"]), products=len(order["products"]))
    return OrderType.from_document(order)
