"""
Shared access control logic for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..auth.base import AuthenticationError
from ..auth.middleware import get_auth_context_optional
from ..logging import get_logger

if TYPE_CHECKING:
    from ..auth.context import AuthContext

logger = get_logger(__name__)

AUTH_CONTEXT_KEY = "auth_context"


async def get_auth_context_from_info(info: strawberry.Info) -> "AuthContext":
    """
    Extract the auth context for the current operation.

    The context is resolved once per request and cached on ``info.context``.
    """
    cached = info.context.get(AUTH_CONTEXT_KEY)
    if cached is not None:
        return cached

    if info.context.get("request") is None:
        logger.error("Request not found in GraphQL context")

    authorization = get_request_header(info, "authorization")
    auth_context = await get_auth_context_optional(authorization)
    info.context[AUTH_CONTEXT_KEY] = auth_context
    return auth_context


async def require_auth(info: strawberry.Info) -> "AuthContext":
    """
    Guard for operations that act on the current user.

    Raises:
        AuthenticationError: If the request carries no valid principal
    """
    auth_context = await get_auth_context_from_info(info)
    if not auth_context.is_authenticated:
        logger.info("Unauthenticated access refused", field=info.field_name)
        raise AuthenticationError("Not logged in")
    return auth_context


def get_request_header(info: strawberry.Info, name: str) -> str | None:
    request = info.context.get("request")
    if request is None:
        return None
    return request.headers.get(name)
