from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import strawberry
from pymongo import ReturnDocument

from ...auth.passwords import hash_password
from ...database.collections import POSTS, TECHS, USERS
from ...database.connection import get_database
from ...logging import get_logger
from ..access_control import require_auth
from ..loaders import to_object_id

if TYPE_CHECKING:
    from ..types.user import User

logger = get_logger(__name__)


# Query resolvers
async def resolve_user(info: strawberry.Info, id: strawberry.ID | None = None) -> User | None:
    """
    Resolve a user by ID, or the current user when no ID is given.

    Looking a user up by ID needs no authentication.
    """
    from ..types.user import User as UserType

    if id is not None:
        user_id = to_object_id(id)
    else:
        auth_context = await require_auth(info)
        user_id = auth_context.user_id

    doc = await get_database()[USERS].find_one({"_id": user_id})
    if doc is None:
        logger.info("User not found", user_id=str(user_id))
        return None
    return UserType.from_document(doc)


async def resolve_users(info: strawberry.Info) -> list[User]:
    from ..types.user import User as UserType

    docs = await get_database()[USERS].find({}).to_list(length=None)
    return [UserType.from_document(doc) for doc in docs]


# Mutation resolvers
async def update_user(
    info: strawberry.Info,
    username: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> User | None:
    """Apply profile changes to the current user and return the updated user."""
    from ..types.user import User as UserType

    auth_context = await require_auth(info)

    changes: dict[str, str] = {}
    if username is not None:
        changes["username"] = username
    if email is not None:
        changes["email"] = email
    if password is not None:
        changes["password"] = hash_password(password)

    db = get_database()
    if changes:
        doc = await db[USERS].find_one_and_update(
            {"_id": auth_context.user_id},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        logger.info("User updated", fields=sorted(changes))
    else:
        doc = await db[USERS].find_one({"_id": auth_context.user_id})

    return UserType.from_document(doc) if doc is not None else None


async def add_post(info: strawberry.Info, title: str, content: str) -> User | None:
    """Create a post authored by the current user and add it to their posts."""
    from ..types.user import User as UserType

    auth_context = await require_auth(info)
    db = get_database()

    author = await db[USERS].find_one({"_id": auth_context.user_id}, {"username": 1})
    if author is None:
        logger.info("User not found", user_id=str(auth_context.user_id))
        return None

    post = {
        "title": title,
        "content": content,
        "createdAt": datetime.now(UTC),
        "author": author.get("username"),
        "tech": [],
    }
    result = await db[POSTS].insert_one(post)

    doc = await db[USERS].find_one_and_update(
        {"_id": auth_context.user_id},
        {"$push": {"posts": result.inserted_id}},
        return_document=ReturnDocument.AFTER,
    )
    logger.info("Post added", post_id=str(result.inserted_id))
    return UserType.from_document(doc) if doc is not None else None


async def delete_post(info: strawberry.Info, post_id: strawberry.ID) -> User | None:
    """
    Remove one of the current user's posts.

    The post document and its tech links are only deleted when the post was
    actually in the caller's posts.
    """
    from ..types.user import User as UserType

    auth_context = await require_auth(info)
    post_oid = to_object_id(post_id)
    db = get_database()

    owned = await db[USERS].update_one(
        {"_id": auth_context.user_id, "posts": post_oid},
        {"$pull": {"posts": post_oid}},
    )
    if owned.modified_count:
        await db[POSTS].delete_one({"_id": post_oid})
        await db[TECHS].update_many({"posts": post_oid}, {"$pull": {"posts": post_oid}})
        logger.info("Post deleted", post_id=str(post_oid))
    else:
        logger.info("Post not owned by user", post_id=str(post_oid))

    doc = await db[USERS].find_one({"_id": auth_context.user_id})
    return UserType.from_document(doc) if doc is not None else None
