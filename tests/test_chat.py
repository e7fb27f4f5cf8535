"""
Tests for the chat endpoint.

Covers the complexity-dependent system instruction, response relaying and
upstream failure handling.
"""
import httpx

from aura_backend.services.prompts import (
    AURA_SYSTEM_PROMPT,
    COMPLEX_STYLE_PROMPT,
    SIMPLIFIED_STYLE_PROMPT,
)


def _system_message(payload):
    messages = payload["messages"]
    assert messages[0]["role"] == "system"
    return messages[0]["content"]


class TestChatAPI:
    """Test the /chat endpoint."""

    def test_chat_returns_upstream_text(self, client, upstream):
        upstream.content = "Photosynthesis turns light into chemical energy."

        response = client.post("/chat", json={"prompt": "What is photosynthesis?"})

        assert response.status_code == 200
        assert response.json() == {"response": "Photosynthesis turns light into chemical energy."}

    def test_chat_sends_system_and_user_messages(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi", "complexity": "default"})

        payload = upstream.last_payload
        assert payload["model"] == "gemini-1.5-flash"
        assert [m["role"] for m in payload["messages"]] == ["system", "user"]
        assert payload["messages"][1]["content"] == "Hi"
        assert "response_format" not in payload

    def test_chat_authenticates_with_arcade_key(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi"})

        request = upstream.requests[-1]
        assert request.headers["authorization"] == "Bearer arcade-test-key"
        assert request.url.path.endswith("/chat/completions")

    def test_simplified_complexity_adds_simplified_style(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi", "complexity": "simplified"})

        system = _system_message(upstream.last_payload)
        assert system.startswith(AURA_SYSTEM_PROMPT)
        assert SIMPLIFIED_STYLE_PROMPT in system
        assert COMPLEX_STYLE_PROMPT not in system

    def test_complex_complexity_adds_complex_style(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi", "complexity": "complex"})

        system = _system_message(upstream.last_payload)
        assert COMPLEX_STYLE_PROMPT in system
        assert SIMPLIFIED_STYLE_PROMPT not in system

    def test_unrecognized_complexity_uses_plain_persona(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi", "complexity": "extreme"})
        assert _system_message(upstream.last_payload) == AURA_SYSTEM_PROMPT

    def test_absent_complexity_uses_plain_persona(self, client, upstream):
        client.post("/chat", json={"prompt": "Hi"})
        assert _system_message(upstream.last_payload) == AURA_SYSTEM_PROMPT

    def test_upstream_503_becomes_500_without_retry(self, client, upstream):
        upstream.status_code = 503

        response = client.post("/chat", json={"prompt": "Hi"})

        assert response.status_code == 500
        assert response.json() == {"error": "Arcade API request failed with status 503"}
        assert len(upstream.requests) == 1

    def test_network_failure_becomes_500(self, client, upstream):
        upstream.fail_with = httpx.ConnectError

        response = client.post("/chat", json={"prompt": "Hi"})

        assert response.status_code == 500
        assert "Could not reach Arcade API" in response.json()["error"]

    def test_missing_prompt_is_rejected(self, client, upstream):
        response = client.post("/chat", json={"complexity": "simplified"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert upstream.requests == []

    def test_upstream_error_response_carries_cors_headers(self, client, upstream):
        upstream.status_code = 503

        response = client.post(
            "/chat",
            json={"prompt": "Hi"},
            headers={"Origin": "http://localhost:5173"},
        )

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:5173")

    def test_html_reply_from_upstream_becomes_typed_500(self, client, upstream):
        upstream.html_body = "<html>bad gateway</html>"

        response = client.post("/chat", json={"prompt": "Hi"})

        assert response.status_code == 500
        assert response.json() == {"error": "Upstream response was not a chat completion"}
