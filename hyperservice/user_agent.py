"""Helpers for building User-Agent strings."""

from importlib import metadata


def format_user_agent(name: str, version: str) -> str:
    """Return the conventional ``"<name> v<version>"`` user agent."""
    return f"{name} v{version}"


def package_user_agent(distribution: str) -> str:
    """
    Build a user agent from an installed distribution's name and version.

    Raises importlib.metadata.PackageNotFoundError if the distribution is
    not installed.
    """
    return format_user_agent(distribution, metadata.version(distribution))
