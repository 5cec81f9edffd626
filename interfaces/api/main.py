"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.middleware.session import session_middleware
from interfaces.api.routes.actor_routes import router as actor_router
from interfaces.api.routes.log_routes import router as log_router
from interfaces.api.routes.title_routes import router as title_router

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info(
        "app_starting",
        env=settings.app_env,
        movie_folder=settings.movie_folder,
        series_folder=settings.series_folder,
    )
    logger.info("app_ready")

    yield

    logger.info("app_shutting_down")
    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Title catalog administration API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Caller identity forwarded by the authentication gateway
    app.middleware("http")(session_middleware)

    # Include routers
    app.include_router(title_router)
    app.include_router(actor_router)
    app.include_router(log_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()
