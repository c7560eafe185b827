"""
Post GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated, Any

import strawberry
from bson import ObjectId

if TYPE_CHECKING:
    from .tech import Tech


@strawberry.type
class Post:
    """Blog post authored by a user."""

    id: strawberry.ID = strawberry.field(name="_id")
    title: str
    content: str
    created_at: datetime | None
    author: str | None
    tech_ids: strawberry.Private[list[ObjectId]]

    @strawberry.field
    async def tech(
        self, info: strawberry.Info
    ) -> list[Annotated["Tech", strawberry.lazy(".tech")]]:  # noqa: E501
        """Get the techs this post is tagged with."""
        from ..resolvers.tech import resolve_techs_by_ids

        return await resolve_techs_by_ids(info, self.tech_ids)

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Post":
        tech = doc.get("tech") or []
        # Older documents stored a single reference
        if isinstance(tech, ObjectId):
            tech = [tech]
        return cls(
            id=strawberry.ID(str(doc["_id"])),
            title=doc.get("title", ""),
            content=doc.get("content", ""),
            created_at=doc.get("createdAt"),
            author=doc.get("author"),
            tech_ids=list(tech),
        )
