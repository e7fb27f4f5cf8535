"""
Client configuration endpoints.

Return environment-sourced identifiers and keys to the browser unchanged.
"""
from fastapi import APIRouter, Depends

from aura_backend.api.models import ApiKeys, ClientConfig
from aura_backend.api.dependencies import get_settings
from aura_backend.config.settings import Settings

router = APIRouter()


@router.get("/config", response_model=ClientConfig)
async def get_client_config(settings: Settings = Depends(get_settings)) -> ClientConfig:
    """Google client id and API key for the frontend."""
    return ClientConfig(
        google_client_id=settings.google_client_id,
        google_api_key=settings.google_api_key,
    )


@router.get("/api/keys", response_model=ApiKeys)
async def get_api_keys(settings: Settings = Depends(get_settings)) -> ApiKeys:
    return ApiKeys(
        gemini_api_key=settings.gemini_api_key,
        arcade_api_key=settings.arcade_api_key,
    )
