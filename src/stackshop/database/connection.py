"""
Database connection management
"""

import os
import threading

from pymongo import ASCENDING, AsyncMongoClient, IndexModel
from pymongo.asynchronous.database import AsyncDatabase

from ..config import settings
from ..logging import get_logger
from .collections import TECHS, USERS

logger = get_logger(__name__)

# Global shared client (one connection pool per process)
_client: AsyncMongoClient | None = None
_database: AsyncDatabase | None = None
_init_lock = threading.Lock()


def get_mongodb_url() -> str:
    """Get the MongoDB URL, checking the environment first for test compatibility."""
    return os.getenv("STACKSHOP_MONGODB_URL") or settings.mongodb_url


def init_database(
    mongodb_url: str | None = None,
    database_name: str | None = None,
    force_reinit: bool = False,
) -> None:
    """Initialize the shared client.

    The client connects lazily, so this never blocks on the network.
    """
    global _client, _database

    if _database is not None and not force_reinit and mongodb_url is None:
        return

    with _init_lock:
        if _database is not None and not force_reinit and mongodb_url is None:
            return

        url = mongodb_url or get_mongodb_url()
        name = database_name or settings.database_name

        _client = AsyncMongoClient(
            url,
            serverSelectionTimeoutMS=settings.database_timeout_ms,
            tz_aware=True,
        )
        _database = _client[name]
        logger.info("Database initialized", database_name=name)


def use_database(database) -> None:
    """Point the shared handle at an already constructed database (tests, scripts)."""
    global _client, _database
    _client = None
    _database = database


async def close_database() -> None:
    global _client, _database
    if _client is not None:
        await _client.close()
        logger.info("Database connection closed")
    _client = None
    _database = None


def reset_database() -> None:
    """Forget the shared handle without closing it (for tests)."""
    global _client, _database
    _client = None
    _database = None


def get_database() -> AsyncDatabase:
    """Get the shared database handle, initializing it on first use."""
    if _database is None:
        init_database()

    if _database is None:
        raise RuntimeError("Database not initialized")

    return _database


async def ensure_indexes() -> None:
    """Create the unique indexes the resolvers rely on."""
    db = get_database()
    await db[USERS].create_indexes([IndexModel([("email", ASCENDING)], unique=True)])
    await db[TECHS].create_indexes([IndexModel([("name", ASCENDING)], unique=True)])
    logger.info("Database indexes ensured")


async def ping_database() -> tuple[bool, str | None]:
    """
    Test the database connection.

    Returns:
        tuple: (success: bool, error_message: str | None)
    """
    try:
        await get_database().command("ping")
        return True, None
    except Exception as e:
        error_str = str(e)
        if "ServerSelectionTimeoutError" in type(e).__name__ or "timed out" in error_str:
            return False, (
                f"Cannot reach MongoDB server: {error_str}\n"
                f"Please check that MongoDB is running and STACKSHOP_MONGODB_URL is correct."
            )
        return False, f"Database connection error ({type(e).__name__}): {error_str}"
