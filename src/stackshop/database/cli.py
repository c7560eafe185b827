#!/usr/bin/env python3
"""
CLI entry point for Stackshop database maintenance.
"""

import asyncio
import random
import sys

import click

from stackshop import __version__
from stackshop.logging import configure_logging, get_logger

from .connection import close_database, ensure_indexes, get_database, init_database, ping_database
from .seed_data import seed_database

logger = get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option("--mongodb-url", default=None, help="MongoDB URL (default: from settings)")
@click.option("--database", "database_name", default=None, help="Database name")
@click.version_option(version=__version__, prog_name="stackshop-db")
def main(log_level: str, mongodb_url: str | None, database_name: str | None) -> None:
    """Stackshop database management."""
    configure_logging(debug=(log_level == "debug"), level=log_level)
    init_database(mongodb_url, database_name, force_reinit=True)


async def _seed(rng_seed: int | None) -> None:
    try:
        await ensure_indexes()
        await seed_database(get_database(), rng=random.Random(rng_seed))
    finally:
        await close_database()


@main.command()
@click.option("--seed", "rng_seed", type=int, default=None, help="Random seed for post pairing")
@click.confirmation_option(prompt="This deletes all users, posts, techs and products. Continue?")
def seed(rng_seed: int | None) -> None:
    """Wipe the database and load the sample data."""
    try:
        asyncio.run(_seed(rng_seed))
        click.echo("all done!")
    except Exception as e:
        logger.error("Database seeding failed", error=str(e))
        sys.exit(1)


async def _ping() -> tuple[bool, str | None]:
    try:
        return await ping_database()
    finally:
        await close_database()


@main.command()
def ping() -> None:
    """Check that the database is reachable."""
    ok, error = asyncio.run(_ping())
    if not ok:
        logger.error("Database ping failed", error=error)
        sys.exit(1)
    click.echo("Database connection OK")


if __name__ == "__main__":
    main()
