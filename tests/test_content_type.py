import httpx
import pytest

from hyperservice.content_type import media_type, require_content_type
from hyperservice.errors import (
    InvalidContentTypeError,
    MissingContentTypeError,
    UnexpectedContentTypeError,
)


def test_media_type_drops_parameters() -> None:
    assert media_type("Application/JSON; charset=utf-8") == "application/json"


@pytest.mark.parametrize(
    "value",
    ["application/json", "application/json; charset=utf-8", "application/problem+json"],
)
def test_accepts_json_media_types(value: str) -> None:
    headers = httpx.Headers({"Content-Type": value})
    assert require_content_type(headers, "application/json").endswith("json")


def test_missing_header() -> None:
    with pytest.raises(MissingContentTypeError):
        require_content_type(httpx.Headers(), "application/json")


def test_control_characters_are_invalid() -> None:
    headers = httpx.Headers([(b"content-type", b"application/json\x01")])
    with pytest.raises(InvalidContentTypeError):
        require_content_type(headers, "application/json")


def test_other_media_type_is_unexpected() -> None:
    headers = httpx.Headers({"Content-Type": "text/plain"})
    with pytest.raises(UnexpectedContentTypeError) as exc:
        require_content_type(headers, "application/json")
    assert exc.value.content_type == "text/plain"
