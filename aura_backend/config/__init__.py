from .settings import ConfigurationError, Settings, load_settings

__all__ = [
    "ConfigurationError",
    "Settings",
    "load_settings",
]
