"""
Parsing and validation of JSON-mode completions.
"""
import json
from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import MalformedResponseError, ResponseSchemaError

ModelT = TypeVar("ModelT", bound=BaseModel)


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Parse completion text that was requested as a JSON object.

    Raises:
        MalformedResponseError: If the text is not JSON or not a JSON object
    """
    try:
        data = json.loads(text)
    except (TypeError, json.JSONDecodeError) as e:
        raise MalformedResponseError(f"Upstream response was not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Upstream response was JSON but not an object (got {type(data).__name__})"
        )
    return data


def validate_payload(data: Dict[str, Any], model: Type[ModelT]) -> ModelT:
    """
    Validate a parsed JSON object against a response model.

    Raises:
        ResponseSchemaError: If required keys are missing or have the wrong type
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        raise ResponseSchemaError(
            f"Upstream response did not match the {model.__name__} schema: {fields}",
            errors=e.errors(include_url=False),
        ) from e
