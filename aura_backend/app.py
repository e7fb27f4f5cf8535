"""
FastAPI application factory.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from aura_backend import __version__
from aura_backend.api.routers import api_router
from aura_backend.config.settings import Settings
from aura_backend.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    request_validation_handler,
)
from aura_backend.services.arcade import ArcadeClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    settings: Settings = app.state.settings
    logger.info(
        f"Starting {settings.app_name} ({settings.environment}), "
        f"upstream {settings.arcade_base_url} model {settings.arcade_model}"
    )

    yield

    logger.info("Shutting down...")
    await app.state.arcade_client.aclose()


def create_app(settings: Settings, arcade_client: Optional[ArcadeClient] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Loaded application settings
        arcade_client: Upstream client; built from settings when omitted
    """
    app = FastAPI(
        title=settings.app_name,
        description="Backend proxy for the Aura learning assistant",
        version=__version__,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.arcade_client = arcade_client or ArcadeClient.from_settings(settings)

    app.add_middleware(ErrorHandlingMiddleware, is_production=settings.is_production)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS; added last so it wraps error responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(api_router)

    # Frontend files, mounted last so API routes take precedence
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory {settings.static_dir!r} not found; frontend not served")

    return app
