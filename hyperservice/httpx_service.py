"""
HttpService implementation backed by httpx.

Requests go through a shared AsyncClient, usually built by an
HttpClientFactory so every call carries the caller's user agent.
"""

import logging
from types import TracebackType
from typing import Any, TypeVar

import httpx

from hyperservice.auth import Auth
from hyperservice.content_type import require_content_type
from hyperservice.errors import ServiceError, TransportError, UnsuccessfulStatusError
from hyperservice.http_client import Client, HttpClientFactory
from hyperservice.serialization import decode_json, encode_json
from hyperservice.service import Uri

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpxService:
    """Makes real HTTP requests through an httpx AsyncClient."""

    def __init__(
        self,
        client: Client,
        *,
        auth_scheme: str = "Bearer",
        expected_content_type: str = "application/json",
    ) -> None:
        self._client = client
        self._auth_scheme = auth_scheme
        self._expected_content_type = expected_content_type

    @classmethod
    def from_factory(cls, factory: HttpClientFactory, **kwargs: Any) -> "HttpxService":
        """Build a service around a fresh client from ``factory``."""
        return cls(factory.create(), **kwargs)

    async def __aenter__(self) -> "HttpxService":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def get(self, uri: Uri) -> str:
        """Perform a GET request and return the body as text."""
        logger.debug("Sending GET request", extra={"uri": str(uri)})
        response = await self._send("GET", uri)
        return response.text

    async def post(self, uri: Uri, auth: Auth, data: Any, response_type: type[T]) -> T:
        """POST ``data`` as JSON with bearer-style auth and decode the JSON response."""
        body = encode_json(data)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"{self._auth_scheme} {auth.api_key}",
        }
        logger.debug("Sending POST request", extra={"uri": str(uri)})
        response = await self._send("POST", uri, content=body, headers=headers)

        if not response.is_success:
            logger.warning(
                "HTTP service responded with error",
                extra={"method": "POST", "uri": str(uri), "status_code": response.status_code},
            )
            raise UnsuccessfulStatusError(response.status_code)

        try:
            require_content_type(response.headers, self._expected_content_type)
            return decode_json(response.content, response_type)
        except ServiceError as exc:
            logger.error(
                "HTTP service returned an unusable body",
                extra={"method": "POST", "uri": str(uri)},
                exc_info=exc,
            )
            raise

    async def _send(self, method: str, uri: Uri, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, uri, **kwargs)
        except httpx.TimeoutException as exc:
            logger.error(
                "HTTP request timed out",
                extra={"method": method, "uri": str(uri)},
                exc_info=exc,
            )
            raise TransportError(f"HTTP request timed out ({method} {uri}).") from exc
        except httpx.InvalidURL as exc:
            logger.error(
                "HTTP request has an invalid URL",
                extra={"method": method, "uri": repr(uri)},
                exc_info=exc,
            )
            raise TransportError(f"Invalid URL ({method} {uri!r}): {exc!s}") from exc
        except httpx.RequestError as exc:
            logger.error(
                "HTTP request failed",
                extra={"method": method, "uri": str(uri)},
                exc_info=exc,
            )
            raise TransportError(f"HTTP request failed ({method} {uri}): {exc!s}") from exc
