"""HTTP client factory for services that talk to remote APIs."""

import logging
from dataclasses import dataclass

import httpx

from hyperservice.errors import ClientConstructionError
from hyperservice.settings import Settings

logger = logging.getLogger(__name__)

Client = httpx.AsyncClient


@dataclass(frozen=True, slots=True)
class HttpClientFactory:
    """Builds AsyncClients that identify themselves with a fixed user agent."""

    user_agent: str
    timeout: float = 30.0
    follow_redirects: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "HttpClientFactory":
        """Factory that builds the client factory from Settings."""
        return cls(
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            follow_redirects=settings.follow_redirects,
        )

    def create(self) -> Client:
        """
        Build an AsyncClient that sends the user agent with every request.

        Building a client only fails when the TLS backend cannot be set up,
        which leaves the caller nothing to retry, so the failure is raised as
        ClientConstructionError instead of a ServiceError.
        """
        try:
            return httpx.AsyncClient(
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
            )
        except OSError as exc:
            logger.critical(
                "Could not create a new HTTP client",
                extra={"user_agent": self.user_agent},
                exc_info=exc,
            )
            raise ClientConstructionError("could not create a new HTTP client") from exc
