from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from bson import ObjectId
from pymongo import ReturnDocument

from ...database.collections import PRODUCTS
from ...database.connection import get_database
from ...logging import get_logger
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.product import Product

logger = get_logger(__name__)


async def resolve_products(info: strawberry.Info) -> list[Product]:
    from ..types.product import Product as ProductType

    docs = await get_database()[PRODUCTS].find({}).to_list(length=None)
    return [ProductType.from_document(doc) for doc in docs]


async def resolve_products_by_ids(info: strawberry.Info, ids: list[ObjectId]) -> list[Product]:
    from ..types.product import Product as ProductType

    docs = await info.context["loaders"].product_loader.load_many(ids)
    return [ProductType.from_document(doc) for doc in docs if doc is not None]


async def update_product(info: strawberry.Info, id: strawberry.ID, quantity: int) -> Product | None:
    """
    Remove ``quantity`` units from a product's stock.

    The sign of ``quantity`` is ignored: the stock always goes down by its
    absolute value, and it may go below zero.
    """
    from ..types.product import Product as ProductType

    decrement = -abs(quantity)
    doc = await get_database()[PRODUCTS].find_one_and_update(
        {"_id": to_object_id(id)},
        {"$inc": {"quantity": decrement}},
        return_document=ReturnDocument.AFTER,
    )
    if doc is None:
        logger.info("Product not found", product_id=str(id))
        return None

    logger.info("Product stock decremented", product_id=str(id), quantity=doc.get("quantity"))
    return ProductType.from_document(doc)
