from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from bson import ObjectId

from ...database.collections import POSTS
from ...database.connection import get_database
from ...logging import get_logger
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.post import Post

logger = get_logger(__name__)


async def resolve_post(info: strawberry.Info, id: strawberry.ID) -> Post | None:
    from ..types.post import Post as PostType

    doc = await get_database()[POSTS].find_one({"_id": to_object_id(id)})
    if doc is None:
        logger.info("Post not found", post_id=str(id))
        return None
    return PostType.from_document(doc)


async def resolve_posts(info: strawberry.Info) -> list[Post]:
    from ..types.post import Post as PostType

    docs = await get_database()[POSTS].find({}).to_list(length=None)
    return [PostType.from_document(doc) for doc in docs]


async def resolve_posts_by_ids(info: strawberry.Info, ids: list[ObjectId]) -> list[Post]:
    from ..types.post import Post as PostType

    docs = await info.context["loaders"].post_loader.load_many(ids)
    return [PostType.from_document(doc) for doc in docs if doc is not None]
