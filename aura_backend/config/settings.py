"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

REQUIRED_VARIABLES = ("ARCADE_API_KEY", "GOOGLE_CLIENT_ID", "GOOGLE_API_KEY")


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid at startup."""


class Settings(BaseSettings):
    """Application settings loaded once from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",  # Ignore extra fields from .env files
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Aura Learning Assistant API"
    environment: str = Field(
        default="local",
        validation_alias="SYSTEM_ENVIRONMENT",
    )
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    # Keys handed to the browser client
    google_client_id: str = Field(..., min_length=1)
    google_api_key: str = Field(..., min_length=1)
    gemini_api_key: str = ""

    # Upstream LLM gateway
    arcade_api_key: str = Field(..., min_length=1)
    arcade_base_url: str = "https://llm.arcade.dev/v1"
    arcade_model: str = "gemini-1.5-flash"
    upstream_timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If any required variable is unset or empty
    """
    try:
        if env_file is not None:
            return Settings(_env_file=env_file)
        return Settings()
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]).upper() for err in e.errors() if err["loc"]})
        missing = [name for name in REQUIRED_VARIABLES if name in fields]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            ) from e
        raise ConfigurationError(f"Invalid configuration: {', '.join(fields)}") from e
