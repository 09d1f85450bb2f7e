"""
Product Service - authenticated CRUD API for products
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .bootstrap import bootstrap
from .config import Settings, get_settings
from .db import Database
from .routes import health, login, products
from .utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and close it on shutdown"""
    settings: Settings = app.state.settings
    database = Database(settings)
    app.state.database = database
    try:
        if settings.BOOTSTRAP_ON_STARTUP:
            bootstrap(database, settings)
        yield
    finally:
        database.dispose()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around an explicit settings object.

    Raises:
        pydantic.ValidationError: If settings are omitted and the environment
            does not provide a usable JWT_SECRET
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Product Service",
        description="Minimal authenticated CRUD API for products",
        version="1.0.0",
        docs_url="/api-docs",
        lifespan=lifespan
    )
    app.state.settings = settings

    # uvicorn --factory lands here without run(); keep any existing setup
    if not logging.getLogger().handlers:
        configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(login.router)
    app.include_router(products.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Entry point for the product-service command."""
    import uvicorn

    settings = get_settings()
    app = create_app(settings)
    logger.info("Server is running on http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
