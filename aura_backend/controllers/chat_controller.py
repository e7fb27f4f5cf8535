"""
Controller for assistant chat.

Builds the persona system instruction and relays a single completion.
"""
import logging

from aura_backend.api.models.chat import ChatRequest, ChatResponse
from aura_backend.services.arcade import ArcadeClient
from aura_backend.services.prompts import build_system_instruction

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat operations."""

    def __init__(self, client: ArcadeClient):
        self.client = client

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Answer a user prompt in the assistant persona.

        Args:
            request: ChatRequest with prompt and optional complexity

        Returns:
            ChatResponse with the upstream completion text

        Raises:
            GatewayError: If the upstream call fails
        """
        messages = [
            {"role": "system", "content": build_system_instruction(request.complexity)},
            {"role": "user", "content": request.prompt},
        ]
        logger.debug(f"Chat request with complexity={request.complexity!r}")
        text = await self.client.complete(messages)
        return ChatResponse(response=text)
