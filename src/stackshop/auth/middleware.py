"""Resolve the authentication context of an incoming request."""

from __future__ import annotations

from bson import ObjectId
from bson.errors import InvalidId

from ..logging import get_logger
from .base import AuthenticationError
from .context import AuthContext
from .tokens import get_token_adapter

logger = get_logger(__name__)


def get_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


async def get_auth_context_optional(authorization: str | None) -> AuthContext:
    """
    Build the auth context for a request.

    Requests without a token, or with a token that fails verification, are
    treated as anonymous. Operations that need a principal reject them later.
    """
    token = get_bearer_token(authorization)
    if token is None:
        return AuthContext.anonymous()

    try:
        principal = await get_token_adapter().verify_token(token)
        user_id = ObjectId(principal["subject"])
    except (AuthenticationError, InvalidId) as e:
        logger.info("Ignoring unusable bearer token", error=str(e))
        return AuthContext.anonymous()

    return AuthContext(user_id=user_id, principal=principal, token=token)
