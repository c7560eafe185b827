"""
Tech GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .post import Post


@strawberry.type
class Tech:
    """A technology tag shared by posts."""

    id: strawberry.ID = strawberry.field(name="_id")
    name: str
    post_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def posts(
        self, info: strawberry.Info
    ) -> list[Annotated["Post", strawberry.lazy(".post")]]:  # noqa: E501
        """Get the posts tagged with this tech."""
        from ..resolvers.post import resolve_posts_by_ids

        return await resolve_posts_by_ids(info, self.post_ids)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Tech":
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            name=doc["name"],
            post_ids=list(doc.get("posts", [])),
        )
