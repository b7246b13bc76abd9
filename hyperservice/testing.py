"""
Testing utilities for HTTP services.

MockService answers GET and POST requests with JSON files from a local
directory instead of making network calls. FixtureLoader reads and decodes
the same kind of files, usually to build POST bodies.

Both treat missing or broken test data as a FixtureError. That is never a
ServiceError: a missing fixture means the test setup is wrong, and it should
fail the test outright instead of being handled by the code under test.

Given ``MockService("tests/data/output")``, a call to
``get("/users/foo/about")`` reads ``tests/data/output/users/foo/about.json``.
"""

import logging
from pathlib import Path
from typing import Any, TypeVar

import anyio
import httpx
from pydantic import TypeAdapter, ValidationError

from hyperservice.auth import Auth
from hyperservice.errors import FixtureDecodeError, FixtureError, FixtureNotFoundError
from hyperservice.serialization import decode_json
from hyperservice.service import Uri

logger = logging.getLogger(__name__)

T = TypeVar("T")

FIXTURE_EXTENSION = "json"


class MockService:
    """An HttpService that returns test data instead of making requests."""

    def __init__(self, root: str) -> None:
        self._root = root
        self._ext = FIXTURE_EXTENSION

    @property
    def root(self) -> str:
        return self._root

    @property
    def extension(self) -> str:
        return self._ext

    def fixture_path(self, uri: Uri) -> str:
        """Map a request URI to the file holding its response."""
        raw_path = httpx.URL(str(uri)).raw_path.decode("ascii")
        path, _, _ = raw_path.partition("?")
        return f"{self._root}{path}.{self._ext}"

    async def _load_resource(self, uri: Uri) -> str:
        path = self.fixture_path(uri)
        logger.debug("Loading mock response", extra={"uri": str(uri), "path": path})
        try:
            return await anyio.Path(path).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FixtureNotFoundError(f"could not find test data: {path}") from exc
        except UnicodeDecodeError as exc:
            raise FixtureDecodeError(f"test data is not valid UTF-8: {path}") from exc
        except OSError as exc:
            raise FixtureError(f"could not read test data: {path}") from exc

    async def get(self, uri: Uri) -> str:
        """Return the whitespace-trimmed test data mapped to ``uri``."""
        data = await self._load_resource(uri)
        return data.strip()

    async def post(self, uri: Uri, auth: Auth, data: Any, response_type: type[T]) -> T:
        """
        Decode the test data mapped to ``uri`` into ``response_type``.

        Neither ``auth`` nor ``data`` is looked at. Test data that does not
        fit ``response_type`` raises SerializationError, as a real response
        would.
        """
        body = await self._load_resource(uri)
        return decode_json(body, response_type)


class FixtureLoader:
    """Loads and deserializes test data from the local file system."""

    def __init__(self, root: str) -> None:
        self._root = root
        self._ext = FIXTURE_EXTENSION

    @property
    def root(self) -> str:
        return self._root

    @property
    def extension(self) -> str:
        return self._ext

    def load(self, resource: str, type_: type[T]) -> T:
        """Read ``{root}/{resource}.json`` and decode it into ``type_``."""
        path = Path(f"{self._root}/{resource}.{self._ext}")
        try:
            data = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FixtureNotFoundError(f"could not read test data: {path}") from exc
        except UnicodeDecodeError as exc:
            raise FixtureDecodeError(f"test data is not valid UTF-8: {path}") from exc
        except OSError as exc:
            raise FixtureError(f"could not read test data: {path}") from exc

        try:
            return TypeAdapter(type_).validate_json(data)
        except ValidationError as exc:
            raise FixtureDecodeError(f"could not deserialize test data: {path}") from exc
