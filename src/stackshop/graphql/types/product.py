"""
Product GraphQL type definitions
"""

from typing import Any

import strawberry


@strawberry.type
class Product:
    """Catalog item available for checkout."""

    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    description: str | None
    image: str | None
    price: float
    quantity: int

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Product":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            name=doc.get("name", ""),
            description=doc.get("description"),
            image=doc.get("image"),
            price=float(doc.get("price", 0)),
            quantity=int(doc.get("quantity", 0)),
        )
