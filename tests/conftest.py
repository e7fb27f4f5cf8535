"""
Shared fixtures.

The upstream gateway is replaced by an httpx.MockTransport plugged into the
OpenAI SDK client, so every test exercises the real request/response path
without network access.
"""
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from aura_backend.app import create_app
from aura_backend.config.settings import Settings
from aura_backend.services.arcade import ArcadeClient


def completion_body(content: Optional[str]) -> Dict[str, Any]:
    """A minimal chat.completion response carrying `content`."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gemini-1.5-flash",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }


class FakeUpstream:
    """Records outgoing chat-completion requests and replies with a canned answer."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.content: Optional[str] = "Hello from Aura"
        self.status_code = 200
        self.error_body = '{"error": {"message": "upstream unavailable"}}'
        self.raw_body: Optional[Dict[str, Any]] = None
        self.html_body: Optional[str] = None
        self.fail_with: Optional[type] = None

    def reply_json(self, data: Any) -> None:
        self.content = json.dumps(data)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with("simulated network failure", request=request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text=self.error_body)
        if self.html_body is not None:
            return httpx.Response(200, text=self.html_body, headers={"content-type": "text/html"})
        if self.raw_body is not None:
            return httpx.Response(200, json=self.raw_body)
        return httpx.Response(200, json=completion_body(self.content))

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Aura</h1>")
    (directory / "app.js").write_text("console.log('aura');")
    return directory


@pytest.fixture
def settings(static_dir):
    return Settings(
        _env_file=None,
        arcade_api_key="arcade-test-key",
        google_client_id="1234.apps.googleusercontent.com",
        google_api_key="google-test-key",
        gemini_api_key="gemini-test-key",
        arcade_base_url="https://llm.arcade.test/v1",
        arcade_model="gemini-1.5-flash",
        static_dir=str(static_dir),
        environment="test",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def arcade_client(settings, http_client):
    return ArcadeClient.from_settings(settings, http_client=http_client)


@pytest.fixture
def app(settings, arcade_client):
    return create_app(settings, arcade_client=arcade_client)


@pytest.fixture
def client(app):
    """Test client for the FastAPI app."""
    return TestClient(app)
