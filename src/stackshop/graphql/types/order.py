"""
Order GraphQL type definitions
"""

from datetime import datetime
from typing import Any

import strawberry
from bson import ObjectId

from .product import Product


@strawberry.type
class Order:
    """A purchase embedded in its user's document."""

    id: strawberry.ID = strawberry.field(name="_id")
    purchase_date: datetime
    product_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def products(self, info: strawberry.Info) -> list[Product]:
        """Get the purchased products, in the order they were added."""
        from ..resolvers.product import resolve_products_by_ids

        return await resolve_products_by_ids(info, self.product_ids)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Order":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            purchase_date=doc["purchaseDate"],
            product_ids=list(doc.get("products", [])),
        )
