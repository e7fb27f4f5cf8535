"""
Response models for the client configuration endpoints.
"""
from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Non-secret identifiers the frontend needs for Google sign-in and APIs."""

    model_config = ConfigDict(populate_by_name=True)

    google_client_id: str = Field(..., alias="googleClientId")
    google_api_key: str = Field(..., alias="googleApiKey")


class ApiKeys(BaseModel):
    """API keys handed to the frontend."""

    model_config = ConfigDict(populate_by_name=True)

    gemini_api_key: str = Field(..., alias="geminiApiKey")
    arcade_api_key: str = Field(..., alias="arcadeApiKey")
