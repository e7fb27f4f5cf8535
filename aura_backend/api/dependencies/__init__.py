from .providers import (
    get_analysis_controller,
    get_arcade_client,
    get_chat_controller,
    get_media_controller,
    get_settings,
)

__all__ = [
    "get_analysis_controller",
    "get_arcade_client",
    "get_chat_controller",
    "get_media_controller",
    "get_settings",
]
