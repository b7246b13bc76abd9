"""Content-Type validation for HTTP responses."""

import httpx

from hyperservice.errors import (
    InvalidContentTypeError,
    MissingContentTypeError,
    UnexpectedContentTypeError,
)


def media_type(content_type: str) -> str:
    """Strip parameters such as ``charset`` and normalize case."""
    return content_type.split(";", 1)[0].strip().lower()


def _header_text(raw: bytes) -> str:
    try:
        value = raw.decode("ascii")
    except UnicodeDecodeError as exc:
        raise InvalidContentTypeError(f"Invalid Content-Type header value: {raw!r}") from exc
    if any(not (char == "\t" or " " <= char <= "~") for char in value):
        raise InvalidContentTypeError(f"Invalid Content-Type header value: {raw!r}")
    return value


def require_content_type(headers: httpx.Headers, expected: str) -> str:
    """
    Return the response media type, raising unless it matches ``expected``.

    Structured syntax suffixes are accepted, so ``application/problem+json``
    satisfies an expected ``application/json``.
    """
    raw_values = [value for key, value in headers.raw if key.lower() == b"content-type"]
    if not raw_values:
        raise MissingContentTypeError()

    found = media_type(_header_text(raw_values[0]))
    wanted = media_type(expected)
    if found == wanted:
        return found

    _, _, subtype = wanted.partition("/")
    if found.endswith(f"+{subtype}"):
        return found
    raise UnexpectedContentTypeError(found)
