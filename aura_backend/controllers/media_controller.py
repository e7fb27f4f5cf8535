"""
Controller for media transcription (mocked by the model).
"""
import logging

from aura_backend.api.models.media import Transcript, TranscriptionRequest
from aura_backend.services.arcade import ArcadeClient, validate_payload
from aura_backend.services.prompts import build_transcript_prompt

logger = logging.getLogger(__name__)


class MediaController:
    """Controller for media transcription operations."""

    def __init__(self, client: ArcadeClient):
        self.client = client

    async def transcribe_media(self, request: TranscriptionRequest) -> Transcript:
        prompt = build_transcript_prompt(request.file_name, request.complexity)
        logger.info(f"Requesting mock transcript for {request.file_name}")
        data = await self.client.complete_json(prompt)
        return validate_payload(data, Transcript)
