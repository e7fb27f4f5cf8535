"""
Client for the Arcade LLM gateway.

Arcade exposes an OpenAI-compatible chat-completion API, so requests go
through the OpenAI SDK pointed at the Arcade base URL. One completion is
requested per call; retries are disabled.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import APIConnectionError, APIResponseValidationError, APIStatusError, AsyncOpenAI
from openai.types.chat import ChatCompletion

from aura_backend.config.settings import Settings

from .exceptions import MalformedResponseError, UpstreamStatusError, UpstreamTransportError
from .parsing import parse_json_object

logger = logging.getLogger(__name__)

JSON_OBJECT_FORMAT = {"type": "json_object"}


class ArcadeClient:
    """Thin async wrapper around the chat-completion endpoint."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "ArcadeClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.arcade_api_key,
            base_url=settings.arcade_base_url,
            model=settings.arcade_model,
            timeout=settings.upstream_timeout_seconds,
            http_client=http_client,
        )

    async def complete(
        self, messages: List[Dict[str, str]], json_response: bool = False
    ) -> str:
        """
        Request a single chat completion and return its message text.

        Args:
            messages: Chat messages as {role, content} dicts
            json_response: Ask the model for a strict JSON object

        Raises:
            UpstreamStatusError: Upstream answered with a non-2xx status
            UpstreamTransportError: Upstream could not be reached in time
            MalformedResponseError: Completion carried no message content
        """
        kwargs: Dict[str, Any] = {}
        if json_response:
            kwargs["response_format"] = JSON_OBJECT_FORMAT

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                **kwargs,
            )
        except APIStatusError as e:
            body = e.response.text
            logger.error(f"Arcade API Error Response ({e.status_code}): {body}")
            raise UpstreamStatusError(e.status_code, body) from e
        except APIConnectionError as e:
            # APITimeoutError is a subclass
            logger.error(f"Arcade API unreachable: {e}")
            raise UpstreamTransportError(f"Could not reach Arcade API: {e}") from e
        except APIResponseValidationError as e:
            raise MalformedResponseError(f"Upstream response could not be read: {e}") from e

        # Non-JSON bodies (e.g. a proxy's HTML error page) come back as plain text
        if not isinstance(completion, ChatCompletion):
            logger.error(f"Arcade API returned a non-JSON body: {str(completion)[:200]}")
            raise MalformedResponseError("Upstream response was not a chat completion")

        if not completion.choices:
            raise MalformedResponseError("Upstream response contained no choices")

        content = completion.choices[0].message.content
        if content is None:
            raise MalformedResponseError("Upstream response contained no message content")
        return content

    async def complete_json(self, prompt: str) -> Dict[str, Any]:
        """Send a single user prompt in JSON mode and parse the reply."""
        content = await self.complete(
            [{"role": "user", "content": prompt}],
            json_response=True,
        )
        return parse_json_object(content)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.client.close()
