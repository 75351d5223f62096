"""Error taxonomy surfaced at the HTTP boundary."""

from __future__ import annotations


class ProxyError(Exception):
    """Base class for errors rendered as ``{error, message}`` JSON bodies."""

    status_code = 500

    def __init__(self, error: str, message: str | None = None) -> None:
        super().__init__(message or error)
        self.error = error
        self.message = message


class InvalidRequest(ProxyError):
    """The caller omitted or malformed a required parameter."""

    status_code = 400


class ConfigurationError(ProxyError):
    """A server-side credential is missing; operator-actionable."""

    def __init__(self, error: str) -> None:
        super().__init__(error)


class UpstreamError(ProxyError):
    """A third-party API failed, timed out, or returned an unusable body."""


class PartialEnrichmentFailure(ProxyError):
    """One item of an enrichment fan-out failed; recovered by the caller."""


__all__ = [
    "ConfigurationError",
    "InvalidRequest",
    "PartialEnrichmentFailure",
    "ProxyError",
    "UpstreamError",
]
