"""
Aura Learning Assistant - Backend
FastAPI proxy between the browser frontend and the Arcade LLM gateway.
"""
import logging
import sys

from fastapi import FastAPI

from aura_backend.app import create_app
from aura_backend.config.settings import ConfigurationError, Settings, load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def load_settings_or_exit() -> Settings:
    """Load settings, or terminate the process before anything is served."""
    try:
        return load_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.critical(f"FATAL ERROR: {e}")
        logger.critical(
            "Please ensure ARCADE_API_KEY, GOOGLE_CLIENT_ID, and GOOGLE_API_KEY are set."
        )
        sys.exit(1)


def build_app() -> FastAPI:
    """App factory for `uvicorn --factory main:build_app`."""
    settings = load_settings_or_exit()
    configure_logging(settings.log_level)
    return create_app(settings)


if __name__ == "__main__":
    import uvicorn

    settings = load_settings_or_exit()
    configure_logging(settings.log_level)
    logger.info(
        f"Server listening on port {settings.port}. "
        f"Open http://localhost:{settings.port} in your browser."
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
