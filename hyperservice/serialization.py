"""JSON encoding and decoding for request and response bodies."""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from hyperservice.errors import SerializationError

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def encode_json(data: Any) -> bytes:
    """Serialize a model, dataclass or plain value into a JSON body."""
    try:
        return _ANY_ADAPTER.dump_json(data)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Error serializing POST body: {exc}") from exc


def decode_json(body: str | bytes, response_type: type[T]) -> T:
    """Deserialize a JSON body into ``response_type``."""
    try:
        return TypeAdapter(response_type).validate_json(body)
    except ValidationError as exc:
        raise SerializationError(f"Error deserializing response body: {exc}") from exc
