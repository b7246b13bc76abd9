"""Error types raised by HTTP services."""


class ServiceError(RuntimeError):
    """Represents failures when making or processing an HTTP request."""


class TransportError(ServiceError):
    """The underlying network operation failed."""


class SerializationError(ServiceError):
    """A request body could not be encoded, or a response body decoded, as JSON."""


class UnsuccessfulStatusError(ServiceError):
    """The response carried a non-success status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Request returned HTTP {status_code}")
        self.status_code = status_code


class MissingContentTypeError(ServiceError):
    """The response has no Content-Type header."""

    def __init__(self) -> None:
        super().__init__("Missing Content-Type header")


class InvalidContentTypeError(ServiceError):
    """The Content-Type header value is not valid text."""


class UnexpectedContentTypeError(ServiceError):
    """The Content-Type is not one the service understands."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unexpected content type: {content_type}")
        self.content_type = content_type


class ClientConstructionError(Exception):
    """
    The HTTP client could not be built.

    This only happens when the host cannot provide a TLS backend, so callers
    are not expected to recover from it. It is deliberately not a ServiceError.
    """


class FixtureError(Exception):
    """Test data required by a mock service is broken."""


class FixtureNotFoundError(FixtureError):
    """Test data could not be found on disk."""


class FixtureDecodeError(FixtureError):
    """Test data could not be deserialized."""
