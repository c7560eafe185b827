from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...auth.base import AuthenticationError
from ...auth.passwords import hash_password, verify_password
from ...auth.tokens import get_token_adapter
from ...database.collections import USERS
from ...database.connection import get_database
from ...logging import get_logger

if TYPE_CHECKING:
    from ..types.user import Auth

logger = get_logger(__name__)

# Same message whether the email or the password was wrong
INCORRECT_CREDENTIALS = "Incorrect credentials"


async def add_user(info: strawberry.Info, username: str, email: str, password: str) -> Auth:
    """Sign up a new user and issue a session token for it.

    A duplicate email is rejected by the unique index on ``users.email``.
    """
    from ..types.user import Auth as AuthType
    from ..types.user import User as UserType

    doc = {
        "username": username,
        "email": email,
        "password": hash_password(password),
        "posts": [],
        "orders": [],
    }
    result = await get_database()[USERS].insert_one(doc)
    doc["_id"] = result.inserted_id

    token = await get_token_adapter().issue_token(doc)
    logger.info("User signed up", user_id=str(result.inserted_id))
    return AuthType(token=token, user=UserType.from_document(doc))


async def login(info: strawberry.Info, email: str, password: str) -> Auth:
    from ..types.user import Auth as AuthType
    from ..types.user import User as UserType

    doc = await get_database()[USERS].find_one({"email": email})
    if doc is None or not verify_password(password, doc.get("password")):
        logger.info("Login refused")
        raise AuthenticationError(INCORRECT_CREDENTIALS)

    token = await get_token_adapter().issue_token(doc)
    logger.info("User logged in", user_id=str(doc["_id"]))
    return AuthType(token=token, user=UserType.from_document(doc))
