"""Typed failures raised by the maps provider adapters."""

from __future__ import annotations


class MapsProviderError(Exception):
    """Base class for failures talking to the maps provider."""

    def __init__(self, message: str, *, status: str | None = None) -> None:
        super().__init__(message)
        self.status = status


class TransientProviderError(MapsProviderError):
    """Rate limiting, generic unknown errors, timeouts and network failures. Worth one retry."""


class PermanentProviderError(MapsProviderError):
    """Invalid or denied requests. Retrying will not help."""


class RouteNotFoundError(MapsProviderError):
    """The provider answered but had no route between the requested points."""


class MapsConfigurationError(MapsProviderError):
    """The provider cannot be called at all, e.g. the API key is missing."""
