"""
Dependency providers.

Settings and the upstream client are created once by the app factory and
stored on app.state; handlers receive them through these providers so tests
can swap them with app.dependency_overrides.
"""
from fastapi import Depends, Request

from aura_backend.config.settings import Settings
from aura_backend.controllers import AnalysisController, ChatController, MediaController
from aura_backend.services.arcade import ArcadeClient


def get_settings(request: Request) -> Settings:
    """Application settings for the running app."""
    return request.app.state.settings


def get_arcade_client(request: Request) -> ArcadeClient:
    """Shared upstream client for the running app."""
    return request.app.state.arcade_client


def get_chat_controller(client: ArcadeClient = Depends(get_arcade_client)) -> ChatController:
    """Dependency injection for ChatController."""
    return ChatController(client)


def get_analysis_controller(
    client: ArcadeClient = Depends(get_arcade_client),
) -> AnalysisController:
    """Dependency injection for AnalysisController."""
    return AnalysisController(client)


def get_media_controller(client: ArcadeClient = Depends(get_arcade_client)) -> MediaController:
    """Dependency injection for MediaController."""
    return MediaController(client)
