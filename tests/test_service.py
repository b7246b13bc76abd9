from typing import Any, TypeVar

import pytest

from models import User
from hyperservice import (
    Auth,
    HttpGet,
    HttpPost,
    HttpService,
    HttpxService,
    InvalidContentTypeError,
    MissingContentTypeError,
    SerializationError,
    ServiceError,
    TransportError,
    UnexpectedContentTypeError,
    UnsuccessfulStatusError,
    Uri,
)
from hyperservice.testing import MockService

T = TypeVar("T")


class GetOnlyService:
    async def get(self, uri: Uri) -> str:
        return "hello"


class PostOnlyService:
    async def post(self, uri: Uri, auth: Auth, data: Any, response_type: type[T]) -> T:
        raise UnsuccessfulStatusError(500)


class UndeclaredService(GetOnlyService, PostOnlyService):
    pass


class UserDirectory:
    """Minimal API client written against the service protocols."""

    def __init__(self, service: HttpService, auth: Auth) -> None:
        self._service = service
        self._auth = auth

    async def about(self, username: str) -> User:
        return User.model_validate_json(await self._service.get(f"/users/{username}/about"))

    async def register(self, user: User) -> User:
        return await self._service.post("/users", self._auth, user, User)


def test_service_is_satisfied_structurally() -> None:
    assert isinstance(UndeclaredService(), HttpService)
    assert isinstance(MockService("unused"), HttpService)


def test_partial_services_only_satisfy_their_capability() -> None:
    assert isinstance(GetOnlyService(), HttpGet)
    assert not isinstance(GetOnlyService(), HttpPost)
    assert not isinstance(GetOnlyService(), HttpService)
    assert isinstance(PostOnlyService(), HttpPost)
    assert not isinstance(PostOnlyService(), HttpService)


def test_httpx_service_is_a_service() -> None:
    assert issubclass(HttpxService, HttpService)


@pytest.mark.anyio
async def test_api_client_runs_against_mock_service(service: MockService) -> None:
    directory = UserDirectory(service, Auth("my-api-key"))
    assert await directory.about("foo") == User(username="foo")
    assert await directory.register(User(username="anyone")) == User(username="foo")


@pytest.mark.anyio
async def test_api_client_sees_service_errors() -> None:
    directory = UserDirectory(UndeclaredService(), Auth("my-api-key"))
    with pytest.raises(UnsuccessfulStatusError):
        await directory.register(User(username="foo"))


@pytest.mark.parametrize(
    "error",
    [
        TransportError("boom"),
        SerializationError("bad body"),
        UnsuccessfulStatusError(404),
        MissingContentTypeError(),
        InvalidContentTypeError("bad header"),
        UnexpectedContentTypeError("text/html"),
    ],
)
def test_request_errors_share_a_base(error: ServiceError) -> None:
    assert isinstance(error, ServiceError)


def test_error_messages() -> None:
    assert str(UnsuccessfulStatusError(404)) == "Request returned HTTP 404"
    assert str(MissingContentTypeError()) == "Missing Content-Type header"
    assert str(UnexpectedContentTypeError("text/html")) == "Unexpected content type: text/html"


def test_auth_repr_hides_api_key() -> None:
    auth = Auth("my-api-key")
    assert auth.api_key == "my-api-key"
    assert "my-api-key" not in repr(auth)
