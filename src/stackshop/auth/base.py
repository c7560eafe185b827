"""Base authentication types."""

from __future__ import annotations

from typing import Literal, NotRequired, TypedDict


class Principal(TypedDict):
    """Identity extracted from a verified session token."""

    provider: Literal["jwt"]
    subject: str  # user id (hex ObjectId)
    email: NotRequired[str]
    username: NotRequired[str]
    claims: NotRequired[dict]


class AuthenticationError(Exception):
    """Raised when a request lacks a principal or credentials do not match."""

    pass
