"""JWT session tokens issued at signup/login and verified on every request."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from ..config import settings
from ..logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class JWTAuthAdapter:
    """Issues and verifies self-signed HS256 session tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "stackshop",
        audience: str = "stackshop-api",
        token_expiry_hours: int = 2,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expiry_hours = token_expiry_hours

    def _decode(self, token: str) -> dict[str, Any]:
        return jwt.decode(
            token,
            self.secret_key,
            algorithms=[self.algorithm],
            issuer=self.issuer,
            audience=self.audience,
            options={
                "verify_exp": True,
                "verify_nbf": True,
                "verify_iat": True,
            },
        )

    async def verify_token(self, token: str) -> Principal:
        """Verify a token and return the principal it was issued for."""
        try:
            payload = self._decode(token)
        except InvalidTokenError as e:
            logger.warning("JWT token validation failed", error=str(e))
            raise AuthenticationError("Invalid token") from e

        subject = payload.get("sub")
        if not subject:
            raise AuthenticationError("Missing 'sub' claim in token")

        principal = Principal(provider="jwt", subject=subject)
        if email := payload.get("email"):
            principal["email"] = email
        if username := payload.get("username"):
            principal["username"] = username
        principal["claims"] = payload
        return principal

    async def issue_token(self, user: dict[str, Any]) -> str:
        """Sign a token bound to a stored user document."""
        now = datetime.now(UTC)
        payload = {
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=self.token_expiry_hours),
            "sub": str(user["_id"]),
            "email": user.get("email"),
            "username": user.get("username"),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_claims(self, token: str) -> dict[str, Any]:
        """Return verified claims, or an empty dict when the token is unusable."""
        try:
            return self._decode(token)
        except InvalidTokenError:
            return {}


@lru_cache(maxsize=1)
def get_token_adapter() -> JWTAuthAdapter:
    """Return the process-wide token adapter built from settings."""
    return JWTAuthAdapter(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        token_expiry_hours=settings.token_expiry_hours,
    )
