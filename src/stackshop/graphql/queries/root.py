"""
Root GraphQL query definitions
"""

from typing import Annotated

import strawberry

from ..types.checkout import Checkout
from ..types.order import Order
from ..types.post import Post
from ..types.product import Product
from ..types.tech import Tech
from ..types.user import User

IdArgument = Annotated[strawberry.ID, strawberry.argument(name="_id")]
OptionalIdArgument = Annotated[strawberry.ID | None, strawberry.argument(name="_id")]


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def user(self, info: strawberry.Info, id: OptionalIdArgument = None) -> User | None:
        """Get a user by ID, or the current user when no ID is given."""
        from ..resolvers.user import resolve_user

        return await resolve_user(info, id)

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """Get all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def post(self, info: strawberry.Info, id: IdArgument) -> Post | None:
        """Get a post by ID."""
        from ..resolvers.post import resolve_post

        return await resolve_post(info, id)

    @strawberry.field
    async def posts(self, info: strawberry.Info) -> list[Post]:
        """Get all posts."""
        from ..resolvers.post import resolve_posts

        return await resolve_posts(info)

    @strawberry.field
    async def tech(self, info: strawberry.Info, id: IdArgument) -> Tech | None:
        """Get a tech by ID."""
        from ..resolvers.tech import resolve_tech

        return await resolve_tech(info, id)

    @strawberry.field
    async def techs(self, info: strawberry.Info) -> list[Tech]:
        """Get all techs."""
        from ..resolvers.tech import resolve_techs

        return await resolve_techs(info)

    @strawberry.field
    async def products(self, info: strawberry.Info) -> list[Product]:
        """Get the whole product catalog."""
        from ..resolvers.product import resolve_products

        return await resolve_products(info)

    @strawberry.field
    async def order(self, info: strawberry.Info, id: IdArgument) -> Order | None:
        """Get one of the current user's orders."""
        from ..resolvers.order import resolve_order

        return await resolve_order(info, id)

    @strawberry.field
    async def checkout(self, info: strawberry.Info, products: list[strawberry.ID]) -> Checkout:
        """Start a payment checkout session for the given products."""
        from ..resolvers.checkout import checkout

        return await checkout(info, products)
