"""
Protocols for communicating with HTTP servers.

A "service" here is a proxy for a remote HTTP server: it offers a uniform way
to make GET and POST requests. API clients take an HttpService instead of
building their own httpx client, so tests can hand them a MockService that
returns static responses without touching the network.

Any class with matching ``get`` and ``post`` coroutines satisfies HttpService;
nothing needs to subclass or register with it. Code that only reads can ask
for an HttpGet, code that only writes for an HttpPost.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

import httpx

from hyperservice.auth import Auth

T = TypeVar("T")

Uri = str | httpx.URL


@runtime_checkable
class HttpGet(Protocol):
    """A service that makes HTTP GET requests."""

    async def get(self, uri: Uri) -> str:
        """
        Perform a GET request to ``uri`` and return the raw body.

        Raise TransportError if the request cannot be completed. The status
        code and content type are left for callers to interpret.
        """
        ...


@runtime_checkable
class HttpPost(Protocol):
    """A service that makes HTTP POST requests."""

    async def post(self, uri: Uri, auth: Auth, data: Any, response_type: type[T]) -> T:
        """
        Send ``data`` as a JSON body to ``uri`` and decode the response.

        How ``auth`` is attached is up to the implementation. Raise
        SerializationError, TransportError or UnsuccessfulStatusError on
        failure.
        """
        ...


@runtime_checkable
class HttpService(HttpGet, HttpPost, Protocol):
    """A service for making calls to an HTTP server and handling responses."""
