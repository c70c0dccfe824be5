"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from polydict import __version__
from polydict.config import settings
from polydict.container import Container, build_container
from polydict.logging_config import setup_logging
from polydict.routes import dictionaries_router, engines_router, query_router

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting polydict...")

    if getattr(app.state, "container", None) is None:
        app.state.container = build_container(settings)

    container: Container = app.state.container
    registry = container.registry
    logger.info(
        f"Serving {len(registry.supported_dictionaries())} dictionaries "
        f"from {registry.count_registered_engines()} engines"
    )

    yield

    logger.info("Shutting down polydict...")


def create_app(container: Container | None = None) -> FastAPI:
    """Create the application, optionally around an existing container."""
    application = FastAPI(
        title="polydict",
        description="One query interface over many dictionary engines",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.container = container

    application.include_router(dictionaries_router)
    application.include_router(engines_router)
    application.include_router(query_router)

    @application.get("/health")
    async def health() -> dict[str, str | int]:
        """Health check endpoint."""
        current: Container | None = application.state.container
        return {
            "status": "healthy",
            "version": __version__,
            "engines": current.registry.count_registered_engines() if current else 0,
        }

    return application


app = create_app()


def run() -> None:
    """Run the application (for use with `polydict-server` command)."""
    import uvicorn

    uvicorn.run(
        "polydict.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
