"""
Request and response models for media transcription.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TranscriptionRequest(BaseModel):
    """Request model for a (mock) media transcription."""

    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(..., alias="fileName", min_length=1, examples=["lecture1.mp4"])
    complexity: Optional[str] = None


class Transcript(BaseModel):
    """Timestamped transcript rendered as HTML paragraphs."""

    model_config = ConfigDict(extra="allow")

    transcript: str
