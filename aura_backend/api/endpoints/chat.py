"""
Assistant chat endpoint.
"""
from fastapi import APIRouter, Depends, status

from aura_backend.api.dependencies import get_chat_controller
from aura_backend.api.models import ChatRequest, ChatResponse, ErrorResponse
from aura_backend.controllers import ChatController

# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Upstream or internal error"},
    },
)
async def chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Chat with the Aura learning assistant.

    The complexity field selects the response style:
    - simplified: short sentences and bullet points
    - complex: detailed, academic language
    - anything else: the default persona
    """
    return await controller.chat(request)
