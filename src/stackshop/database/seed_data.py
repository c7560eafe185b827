"""
Seed the database with sample users, posts, techs and products.

The seed wipes every collection it loads, so it is safe to rerun but must
never be pointed at a live database.
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass
from datetime import UTC, datetime
from importlib import resources
from typing import Any

from pymongo.asynchronous.database import AsyncDatabase

from ..auth.passwords import hash_password, is_password_hash
from ..logging import get_logger
from .collections import POSTS, PRODUCTS, TECHS, USERS

logger = get_logger(__name__)

DATA_PACKAGE = "stackshop.database.data"


@dataclass
class SeedData:
    users: list[dict[str, Any]]
    posts: list[dict[str, Any]]
    techs: list[dict[str, Any]]
    products: list[dict[str, Any]]


@dataclass
class SeedSummary:
    users: int
    posts: int
    techs: int
    products: int


def _read_json(filename: str) -> list[dict[str, Any]]:
    return json.loads(resources.files(DATA_PACKAGE).joinpath(filename).read_text("utf-8"))


def load_sample_data() -> SeedData:
    """Load the sample datasets shipped with the package."""
    return SeedData(
        users=_read_json("users.json"),
        posts=_read_json("posts.json"),
        techs=_read_json("techs.json"),
        products=_read_json("products.json"),
    )


def _prepare_users(users: list[dict[str, Any]]) -> list[dict[str, Any]]:
    prepared = []
    for user in users:
        doc = {**user, "posts": [], "orders": []}
        if doc.get("password") and not is_password_hash(doc["password"]):
            doc["password"] = hash_password(doc["password"])
        prepared.append(doc)
    return prepared


async def seed_database(
    db: AsyncDatabase,
    *,
    rng: random.Random | None = None,
    data: SeedData | None = None,
) -> SeedSummary:
    """
    Replace the contents of the store with sample data.

    Each post is given one author and one tech, chosen uniformly at random,
    and the references are written in both directions (user.posts,
    post.tech, tech.posts).

    Args:
        db: Target database
        rng: Source of randomness for the pairing (pass a seeded instance
            for reproducible output)
        data: Datasets to load (defaults to the bundled sample data)

    Returns:
        Number of documents loaded per collection
    """
    rng = rng or random.Random()
    data = data or load_sample_data()

    if not data.users or not data.techs:
        raise ValueError("Seed data needs at least one user and one tech")

    logger.info("Starting database seeding")

    for name in (USERS, POSTS, TECHS, PRODUCTS):
        result = await db[name].delete_many({})
        logger.debug("Cleared collection", collection=name, deleted=result.deleted_count)

    now = datetime.now(UTC)
    users = _prepare_users(data.users)
    posts = [{**post, "createdAt": post.get("createdAt", now), "tech": []} for post in data.posts]
    techs = [{**tech, "posts": []} for tech in data.techs]
    products = [dict(product) for product in data.products]

    for name, documents in ((USERS, users), (POSTS, posts), (TECHS, techs), (PRODUCTS, products)):
        if not documents:
            continue
        result = await db[name].insert_many(documents)
        for doc, inserted_id in zip(documents, result.inserted_ids, strict=True):
            doc["_id"] = inserted_id

    for post in posts:
        author = rng.choice(users)
        tech = rng.choice(techs)

        await db[USERS].update_one({"_id": author["_id"]}, {"$push": {"posts": post["_id"]}})
        await db[POSTS].update_one(
            {"_id": post["_id"]},
            {"$set": {"tech": [tech["_id"]], "author": author.get("username")}},
        )
        await db[TECHS].update_one({"_id": tech["_id"]}, {"$push": {"posts": post["_id"]}})

    summary = SeedSummary(
        users=len(users), posts=len(posts), techs=len(techs), products=len(products)
    )
    logger.info(
        "Database seeding completed",
        users=summary.users,
        posts=summary.posts,
        techs=summary.techs,
        products=summary.products,
    )
    return summary
