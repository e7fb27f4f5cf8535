"""
Errors raised while talking to the upstream LLM gateway.

Every runtime failure of a proxied request is a GatewayError, so the error
middleware can turn it into a 500 response with a readable message.
"""
from typing import Any, List, Optional


class GatewayError(Exception):
    """Base class for upstream proxy failures."""


class UpstreamTransportError(GatewayError):
    """The upstream gateway could not be reached (connection error or timeout)."""


class UpstreamStatusError(GatewayError):
    """The upstream gateway answered with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Arcade API request failed with status {status_code}")


class MalformedResponseError(GatewayError):
    """The upstream reply could not be read as the expected JSON document."""


class ResponseSchemaError(MalformedResponseError):
    """The upstream reply was a JSON object, but not of the requested shape."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        self.errors = errors or []
        super().__init__(message)
