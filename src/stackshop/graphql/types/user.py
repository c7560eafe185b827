"""
User GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

from .order import Order

if TYPE_CHECKING:
    from .post import Post


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID = strawberry.field(name="_id")
    username: str | None
    email: str
    post_ids: strawberry.Private[list[ObjectId]]
    order_documents: strawberry.Private[list[dict[str, Any]]]

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:  # noqa: E501
        """Get the posts written by this user."""
        from ..resolvers.post import resolve_posts_by_ids

        return await resolve_posts_by_ids(info, self.post_ids)

    @strawberry.field
    def orders(self) -> list[Order]:
        """Get this user's orders, newest first."""
        orders = [Order.from_document(doc) for doc in self.order_documents]
        orders.sort(key=lambda order: order.purchase_date, reverse=True)
        return orders

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "User":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            username=doc.get("username"),
            email=doc["email"],
            post_ids=list(doc.get("posts", [])),
            order_documents=list(doc.get("orders", [])),
        )


@strawberry.type
class Auth:
    """Session token issued at signup or login."""

    token: str
    user: User
