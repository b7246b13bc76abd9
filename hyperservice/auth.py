"""Credentials passed to HTTP services."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Auth:
    """An API key used to authenticate requests."""

    api_key: str = field(repr=False)
