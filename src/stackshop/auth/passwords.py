"""Salted password hashing for stored user credentials."""

from __future__ import annotations

import hashlib
import hmac
import secrets

from ..config import settings

ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, salt: str | None = None, iterations: int | None = None) -> str:
    """Hash a password as ``pbkdf2_sha256$<iterations>$<salt>$<hex digest>``."""
    if not salt:
        salt = secrets.token_hex(16)
    if iterations is None:
        iterations = settings.password_hash_iterations

    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations)
    return f"{ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str | None) -> bool:
    """Check a plaintext password against a stored hash."""
    if not encoded:
        return False
    try:
        algorithm, iterations, salt, _ = encoded.split("$", 3)
    except ValueError:
        return False
    if algorithm != ALGORITHM:
        return False

    candidate = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(candidate, encoded)


def is_password_hash(value: str) -> bool:
    return value.startswith(f"{ALGORITHM}$")
