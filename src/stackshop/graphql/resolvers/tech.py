from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry
from bson import ObjectId
from pymongo import ReturnDocument

from ...database.collections import POSTS, TECHS
from ...database.connection import get_database
from ...logging import get_logger
from ..access_control import require_auth
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.post import Post
    from ..types.tech import Tech

logger = get_logger(__name__)


# Query resolvers
async def resolve_tech(info: strawberry.Info, id: strawberry.ID) -> Tech | None:
    from ..types.tech import Tech as TechType

    doc = await get_database()[TECHS].find_one({"_id": to_object_id(id)})
    if doc is None:
        logger.info("Tech not found", tech_id=str(id))
        return None
    return TechType.from_document(doc)


async def resolve_techs(info: strawberry.Info) -> list[Tech]:
    from ..types.tech import Tech as TechType

    docs = await get_database()[TECHS].find({}).to_list(length=None)
    return [TechType.from_document(doc) for doc in docs]


async def resolve_techs_by_ids(info: strawberry.Info, ids: list[ObjectId]) -> list[Tech]:
    from ..types.tech import Tech as TechType

    docs = await info.context["loaders"].tech_loader.load_many(ids)
    return [TechType.from_document(doc) for doc in docs if doc is not None]


# Mutation resolvers
async def add_tech(info: strawberry.Info, post_id: strawberry.ID, name: str) -> Post | None:
    """
    Tag a post with a tech, creating the tech if no tech has that name yet.

    The tech is upserted on its unique name, and both sides of the link are
    added with ``$addToSet``, so repeating the call changes nothing. An
    unknown post leaves the techs untouched.
    """
    from ..types.post import Post as PostType

    await require_auth(info)
    post_oid = to_object_id(post_id)
    db = get_database()

    if await db[POSTS].find_one({"_id": post_oid}, {"_id": 1}) is None:
        logger.info("Post not found", post_id=str(post_id))
        return None

    tech = await db[TECHS].find_one_and_update(
        {"name": name},
        {"$setOnInsert": {"posts": []}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )

    post = await db[POSTS].find_one_and_update(
        {"_id": post_oid},
        {"$addToSet": {"tech": tech["_id"]}},
        return_document=ReturnDocument.AFTER,
    )
    if post is None:
        logger.info("Post not found", post_id=str(post_id))
        return None

    await db[TECHS].update_one({"_id": tech["_id"]}, {"$addToSet": {"posts": post_oid}})

    logger.info("Tech linked to post", post_id=str(post_oid), tech_id=str(tech["_id"]), name=name)
    return PostType.from_document(post)
