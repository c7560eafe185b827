"""Authentication for the Stackshop API."""

from .base import AuthenticationError, Principal
from .context import AuthContext
from .middleware import get_auth_context_optional, get_bearer_token
from .passwords import hash_password, verify_password
from .tokens import JWTAuthAdapter, get_token_adapter

__all__ = [
    "AuthContext",
    "AuthenticationError",
    "JWTAuthAdapter",
    "Principal",
    "get_auth_context_optional",
    "get_bearer_token",
    "get_token_adapter",
    "hash_password",
    "verify_password",
]
