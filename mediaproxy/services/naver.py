"""Naver book search pass-through."""

from __future__ import annotations

from typing import Any

from mediaproxy.logging import logger
from mediaproxy.services.exceptions import ConfigurationError, InvalidRequest
from mediaproxy.services.upstream import _BaseUpstreamService

DEFAULT_DISPLAY = 20
DEFAULT_START = 1
DEFAULT_SORT = "relevance"

# Naver names relevance ordering "sim".
SORT_ALIASES = {
    "relevance": "sim",
    "sim": "sim",
    "date": "date",
}


class NaverBookService(_BaseUpstreamService):
    upstream_name = "Naver"

    async def search_books(
        self,
        query: str | None,
        *,
        display: int = DEFAULT_DISPLAY,
        start: int = DEFAULT_START,
        sort: str = DEFAULT_SORT,
    ) -> Any:
        query = self._require_query(query)
        sort_value = SORT_ALIASES.get((sort or DEFAULT_SORT).strip().lower())
        if sort_value is None:
            raise InvalidRequest(
                "Invalid sort parameter",
                f"sort must be one of: {', '.join(sorted(SORT_ALIASES))}",
            )

        client_id = self._read_secret(self._settings.secrets.naver_client_id)
        client_secret = self._read_secret(self._settings.secrets.naver_client_secret)
        if not client_id or not client_secret:
            logger.error("upstream_secret_missing", upstream=self.upstream_name)
            raise ConfigurationError("Naver API credentials not configured")

        params = {
            "query": query,
            "display": str(display),
            "start": str(start),
            "sort": sort_value,
        }
        headers = {
            "X-Naver-Client-Id": client_id,
            "X-Naver-Client-Secret": client_secret,
        }
        logger.info("naver_book_search_request", query=query, display=display, start=start, sort=sort_value)
        return await self._get_json(
            str(self._settings.upstreams.naver_book_url), params=params, headers=headers
        )


__all__ = ["NaverBookService", "SORT_ALIASES"]
