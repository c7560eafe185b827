from typing import Any

from bson import ObjectId
from strawberry.dataloader import DataLoader

from ..database.collections import POSTS, PRODUCTS, TECHS
from ..database.connection import get_database


async def _load_by_ids(collection: str, keys: list[ObjectId]) -> list[dict[str, Any] | None]:
    cursor = get_database()[collection].find({"_id": {"$in": list(dict.fromkeys(keys))}})
    documents = await cursor.to_list(length=None)
    documents_map = {doc["_id"]: doc for doc in documents}
    return [documents_map.get(key) for key in keys]


async def load_posts(keys: list[ObjectId]) -> list[dict[str, Any] | None]:
    """Batch load posts by ID."""
    return await _load_by_ids(POSTS, keys)


async def load_techs(keys: list[ObjectId]) -> list[dict[str, Any] | None]:
    """Batch load techs by ID."""
    return await _load_by_ids(TECHS, keys)


async def load_products(keys: list[ObjectId]) -> list[dict[str, Any] | None]:
    """Batch load products by ID."""
    return await _load_by_ids(PRODUCTS, keys)


class Loaders:
    def __init__(self):
        self.post_loader = DataLoader(load_fn=load_posts)
        self.tech_loader = DataLoader(load_fn=load_techs)
        self.product_loader = DataLoader(load_fn=load_products)


def to_object_id(value: str | ObjectId) -> ObjectId:
    """Parse a GraphQL ID into an ObjectId (raises ``bson.errors.InvalidId``)."""
    return value if isinstance(value, ObjectId) else ObjectId(str(value))
