"""
Main FastAPI application for the Stackshop backend
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..config import settings
from ..database import close_database, ensure_indexes, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting Stackshop API...")
    init_database()

    try:
        await ensure_indexes()
    except Exception as e:
        logger.error(
            "Could not ensure database indexes",
            error=str(e),
            note="Application will continue; unique email and tech name are not enforced",
        )
        if settings.environment.lower() in ("production", "prod"):
            raise

    if not settings.stripe_secret_key:
        logger.warning("No Stripe secret key configured; checkout will fail")

    yield

    logger.info("Shutting down Stackshop API...")
    await close_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Stackshop API",
        description="GraphQL API for a tech blog with a product shop",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("STACKSHOP_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            logger.info("Validating GraphQL schema...")
            validate_schema()

            app.include_router(create_graphql_router(), prefix="")
            logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            raise

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stackshop.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
