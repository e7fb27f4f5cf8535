from fastapi import APIRouter

from .endpoints import analysis
from .endpoints import chat
from .endpoints import config
from .endpoints import health
from .endpoints import media

api_router = APIRouter()

# Include endpoint routers
# Paths are served from the root, matching what the frontend calls
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(config.router, prefix="", tags=["config"])
api_router.include_router(chat.router, prefix="", tags=["chat"])
api_router.include_router(analysis.router, prefix="", tags=["analysis"])
api_router.include_router(media.router, prefix="", tags=["media"])
