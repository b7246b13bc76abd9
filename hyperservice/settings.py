"""Environment-driven configuration for HTTP clients."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for client configuration."""

    user_agent: str
    timeout: float = 30.0
    follow_redirects: bool = True

    @classmethod
    def load(cls, user_agent: str) -> "Settings":
        """
        Load configuration from environment variables.

        The user agent identifies the calling program, so it is always passed
        in by the caller rather than read from the environment.
        """
        load_dotenv()

        timeout_raw = os.getenv("HYPERSERVICE_TIMEOUT", "").strip() or "30"
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("HYPERSERVICE_TIMEOUT must be a numeric value.") from exc
        if timeout <= 0:
            raise ValueError("HYPERSERVICE_TIMEOUT must be greater than zero.")

        redirects_raw = os.getenv("HYPERSERVICE_FOLLOW_REDIRECTS", "").strip().lower() or "true"
        if redirects_raw in _TRUTHY:
            follow_redirects = True
        elif redirects_raw in _FALSY:
            follow_redirects = False
        else:
            raise ValueError("HYPERSERVICE_FOLLOW_REDIRECTS must be a boolean value.")

        return cls(
            user_agent=user_agent,
            timeout=timeout,
            follow_redirects=follow_redirects,
        )
