"""
Async HTTP services with a uniform GET/POST interface.

API clients depend on the HttpService protocols instead of a concrete HTTP
client, so the real httpx-backed service can be swapped for the file-backed
MockService in tests.
"""

from hyperservice.auth import Auth
from hyperservice.errors import (
    ClientConstructionError,
    FixtureDecodeError,
    FixtureError,
    FixtureNotFoundError,
    InvalidContentTypeError,
    MissingContentTypeError,
    SerializationError,
    ServiceError,
    TransportError,
    UnexpectedContentTypeError,
    UnsuccessfulStatusError,
)
from hyperservice.http_client import Client, HttpClientFactory
from hyperservice.httpx_service import HttpxService
from hyperservice.service import HttpGet, HttpPost, HttpService, Uri
from hyperservice.settings import Settings
from hyperservice.user_agent import format_user_agent, package_user_agent

__version__ = "0.1.0"

__all__ = [
    "Auth",
    "Client",
    "ClientConstructionError",
    "FixtureDecodeError",
    "FixtureError",
    "FixtureNotFoundError",
    "HttpClientFactory",
    "HttpGet",
    "HttpPost",
    "HttpService",
    "HttpxService",
    "InvalidContentTypeError",
    "MissingContentTypeError",
    "SerializationError",
    "ServiceError",
    "Settings",
    "TransportError",
    "UnexpectedContentTypeError",
    "UnsuccessfulStatusError",
    "Uri",
    "format_user_agent",
    "package_user_agent",
]
