#!/usr/bin/env python3
"""
Main CLI entry point for the Stackshop backend server.
"""

import os
import sys

import click
import uvicorn

from stackshop import __version__
from stackshop.database.cli import main as db_cli
from stackshop.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="stackshop")
def cli() -> None:
    """Stackshop CLI - run the API server and seed the database."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=3001, type=int, help="Port to bind to (default: 3001)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Stackshop API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info("Starting Stackshop API server", host=host, port=port, reload=reload)

    # The app reads these at import time, including in reloader subprocesses
    if log_level == "debug":
        os.environ["STACKSHOP_DEBUG"] = "true"
        os.environ["STACKSHOP_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("STACKSHOP_DEBUG", "false")
        os.environ.setdefault("STACKSHOP_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "stackshop.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


cli.add_command(db_cli, name="db")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
