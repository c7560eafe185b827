"""
Checkout GraphQL type definitions
"""

import strawberry


@strawberry.type
class Checkout:
    """Payment processor checkout session."""

    session: str
