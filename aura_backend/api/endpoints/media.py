"""
Media transcription endpoint.
"""
from fastapi import APIRouter, Depends, status

from aura_backend.api.dependencies import get_media_controller
from aura_backend.api.models import ErrorResponse, Transcript, TranscriptionRequest
from aura_backend.controllers import MediaController

router = APIRouter()


@router.post(
    "/transcribe-media",
    status_code=status.HTTP_200_OK,
    response_model=Transcript,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Upstream error or malformed model output"},
    },
)
async def transcribe_media(
    request: TranscriptionRequest,
    controller: MediaController = Depends(get_media_controller),
) -> Transcript:
    """
    Produce a mock timestamped transcript for an uploaded media file.

    Only the file name is sent upstream; the transcript is generated by the model.
    """
    return await controller.transcribe_media(request)
