from .client import ArcadeClient
from .exceptions import (
    GatewayError,
    MalformedResponseError,
    ResponseSchemaError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from .parsing import parse_json_object, validate_payload

__all__ = [
    "ArcadeClient",
    "GatewayError",
    "MalformedResponseError",
    "ResponseSchemaError",
    "UpstreamStatusError",
    "UpstreamTransportError",
    "parse_json_object",
    "validate_payload",
]
