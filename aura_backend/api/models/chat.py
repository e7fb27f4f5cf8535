"""
Request and response models for the chat endpoint.
"""
from typing import Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Payload for a single-turn chat with the assistant.

    - prompt: The user's message
    - complexity: "simplified", "complex", or anything else for the default style
    """
    prompt: str = Field(..., min_length=1, examples=["Explain photosynthesis."])
    complexity: Optional[str] = Field(
        default=None,
        examples=["simplified", "complex", "default"],
    )


class ChatResponse(BaseModel):
    """Assistant reply text."""

    response: str
