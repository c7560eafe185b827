"""
Root GraphQL mutation definitions
"""

import strawberry

from ..queries.root import IdArgument
from ..types.order import Order
from ..types.post import Post
from ..types.product import Product
from ..types.user import Auth, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Account mutations
    @strawberry.mutation(name="addUser")
    async def add_user(
        self, info: strawberry.Info, username: str, email: str, password: str
    ) -> Auth:
        """Sign up and receive a session token."""
        from ..resolvers.auth import add_user

        return await add_user(info, username, email, password)

    @strawberry.mutation
    async def login(self, info: strawberry.Info, email: str, password: str) -> Auth:
        """Exchange credentials for a session token."""
        from ..resolvers.auth import login

        return await login(info, email, password)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self,
        info: strawberry.Info,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> User | None:
        """Update the current user's profile."""
        from ..resolvers.user import update_user

        return await update_user(info, username, email, password)

    # Blog mutations
    @strawberry.mutation(name="addPost")
    async def add_post(self, info: strawberry.Info, title: str, content: str) -> User | None:
        """Publish a post as the current user."""
        from ..resolvers.user import add_post

        return await add_post(info, title, content)

    @strawberry.mutation(name="deletePost")
    async def delete_post(self, info: strawberry.Info, post_id: strawberry.ID) -> User | None:
        """Delete one of the current user's posts."""
        from ..resolvers.user import delete_post

        return await delete_post(info, post_id)

    @strawberry.mutation(name="addTech")
    async def add_tech(
        self, info: strawberry.Info, post_id: strawberry.ID, name: str
    ) -> Post | None:
        """Tag a post with a tech, creating the tech on first use."""
        from ..resolvers.tech import add_tech

        return await add_tech(info, post_id, name)

    # Shop mutations
    @strawberry.mutation(name="addOrder")
    async def add_order(self, info: strawberry.Info, products: list[strawberry.ID]) -> Order:
        """Record an order for the current user."""
        from ..resolvers.order import add_order

        return await add_order(info, products)

    @strawberry.mutation(name="updateProduct")
    async def update_product(
        self, info: strawberry.Info, id: IdArgument, quantity: int
    ) -> Product | None:
        """Take units out of a product's stock."""
        from ..resolvers.product import update_product

        return await update_product(info, id, quantity)
