"""
Shared pytest fixtures and configuration for all tests.

The document store is mongomock behind a small async facade that mirrors
the parts of PyMongo's async API the application uses.
"""

import os
from collections.abc import Generator
from typing import Any

import mongomock
import pytest

from stackshop.auth.passwords import hash_password
from stackshop.auth.tokens import get_token_adapter
from stackshop.database import connection

from helpers import AsyncDatabase


@pytest.fixture
def db() -> Generator[AsyncDatabase, None, None]:
    """Fresh in-memory database wired in as the application's database."""
    client = mongomock.MongoClient(tz_aware=True)
    database = AsyncDatabase(client["stackshop_test"])
    database.sync["users"].create_index("email", unique=True)
    database.sync["techs"].create_index("name", unique=True)

    connection.use_database(database)
    yield database
    connection.reset_database()


@pytest.fixture
def make_user(db: AsyncDatabase):
    """Insert a user with a hashed password and return the stored document."""

    def _make_user(
        username: str = "lernantino",
        email: str = "lernantino@example.com",
        password: str = "password01",
        **extra: Any,
    ) -> dict[str, Any]:
        doc = {
            "username": username,
            "email": email,
            "password": hash_password(password, iterations=1000),
            "posts": [],
            "orders": [],
            **extra,
        }
        doc["_id"] = db.sync["users"].insert_one(doc).inserted_id
        return doc

    return _make_user


@pytest.fixture
def make_product(db: AsyncDatabase):
    def _make_product(
        name: str = "Rubber Duck", price: float = 7.5, quantity: int = 10, **extra: Any
    ) -> dict[str, Any]:
        doc = {
            "name": name,
            "description": f"{name} description",
            "image": f"{name.lower().replace(' ', '-')}.jpg",
            "price": price,
            "quantity": quantity,
            **extra,
        }
        doc["_id"] = db.sync["products"].insert_one(doc).inserted_id
        return doc

    return _make_product


@pytest.fixture
def make_post(db: AsyncDatabase):
    def _make_post(title: str = "Async all the way down", **extra: Any) -> dict[str, Any]:
        doc = {"title": title, "content": f"{title} content", "tech": [], **extra}
        doc["_id"] = db.sync["posts"].insert_one(doc).inserted_id
        return doc

    return _make_post


@pytest.fixture
def auth_headers_for():
    """Build request headers carrying a session token for a stored user."""

    async def _headers(user: dict[str, Any], **extra: str) -> dict[str, str]:
        token = await get_token_adapter().issue_token(user)
        return {"authorization": f"Bearer {token}", **extra}

    return _headers


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
