"""Shared plumbing for services that call third-party content APIs."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from mediaproxy.config import ProxySettings
from mediaproxy.logging import logger
from mediaproxy.services.exceptions import ConfigurationError, InvalidRequest, UpstreamError

ERROR_DETAIL_LIMIT = 500


def read_secret(secret: Any) -> str | None:
    if not secret:
        return None
    try:
        value = secret.get_secret_value()
    except AttributeError:
        value = str(secret)
    return value or None


def require_query(query: str | None) -> str:
    """Return the trimmed query or reject the request before any upstream call."""

    normalized = (query or "").strip()
    if not normalized:
        raise InvalidRequest(
            "Query parameter is required",
            "Please provide a search query",
        )
    return normalized


class _BaseUpstreamService:
    """Fetch + error-wrap + JSON decode around a shared ``httpx.AsyncClient``."""

    upstream_name = "upstream"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ProxySettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ProxySettings()

    _read_secret = staticmethod(read_secret)

    def _require_secret(self, secret: Any, error: str) -> str:
        value = self._read_secret(secret)
        if not value:
            logger.error("upstream_secret_missing", upstream=self.upstream_name)
            raise ConfigurationError(error)
        return value

    _require_query = staticmethod(require_query)

    async def _get_json(
        self,
        url: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        label = self.upstream_name
        try:
            response = await self._client.get(
                url,
                params=params,
                headers=headers,
                timeout=self._settings.upstreams.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:ERROR_DETAIL_LIMIT]
            status_code = exc.response.status_code
            logger.warning("upstream_request_failed", upstream=label, status_code=status_code)
            raise UpstreamError(
                f"{label} API error",
                f"{label} API error: {status_code} - {detail}",
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("upstream_request_timeout", upstream=label)
            raise UpstreamError(f"{label} API error", f"{label} request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("upstream_request_failed", upstream=label, error=str(exc))
            raise UpstreamError(f"{label} API error", f"{label} request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("upstream_invalid_json", upstream=label)
            raise UpstreamError(
                f"{label} API error",
                f"{label} response is not valid JSON.",
            ) from exc


__all__ = ["ERROR_DETAIL_LIMIT", "read_secret", "require_query"]
