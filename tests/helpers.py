"""
Test helpers: an async facade over mongomock and GraphQL context builders.
"""

from types import SimpleNamespace
from typing import Any

from bson import ObjectId

from stackshop.graphql.loaders import Loaders


class AsyncCursor:
    def __init__(self, cursor: Any):
        self._cursor = cursor

    def sort(self, *args: Any, **kwargs: Any) -> "AsyncCursor":
        self._cursor = self._cursor.sort(*args, **kwargs)
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        documents = list(self._cursor)
        return documents if length is None else documents[:length]


class AsyncCollection:
    """Exposes a mongomock collection through PyMongo's async method names."""

    def __init__(self, collection: Any):
        self._collection = collection

    def find(self, *args: Any, **kwargs: Any) -> AsyncCursor:
        return AsyncCursor(self._collection.find(*args, **kwargs))

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._collection, name)
        if not callable(attr):
            return attr

        async def call(*args: Any, **kwargs: Any) -> Any:
            return attr(*args, **kwargs)

        return call


class AsyncDatabase:
    def __init__(self, database: Any):
        self._database = database

    def __getitem__(self, name: str) -> AsyncCollection:
        return AsyncCollection(self._database[name])

    @property
    def sync(self) -> Any:
        """The underlying mongomock database, for direct assertions."""
        return self._database

    async def command(self, name: str, *args: Any, **kwargs: Any) -> dict[str, Any]:
        if name == "ping":
            return {"ok": 1.0}
        return self._database.command(name, *args, **kwargs)


class FakeRequest:
    """Stands in for a Starlette request inside the GraphQL context."""

    def __init__(self, headers: dict[str, str] | None = None):
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}


def graphql_context(headers: dict[str, str] | None = None) -> dict[str, Any]:
    """GraphQL context equivalent to the one built for an HTTP request."""
    return {"request": FakeRequest(headers), "loaders": Loaders()}


def mock_info(headers: dict[str, str] | None = None, field_name: str = "test") -> Any:
    """Minimal ``strawberry.Info`` stand-in for calling resolvers directly."""
    return SimpleNamespace(context=graphql_context(headers), field_name=field_name)


def new_id() -> str:
    return str(ObjectId())
