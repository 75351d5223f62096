"""TMDB movie/TV search and TV detail pass-through."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from mediaproxy.logging import logger
from mediaproxy.services.exceptions import InvalidRequest
from mediaproxy.services.upstream import _BaseUpstreamService


class TmdbService(_BaseUpstreamService):
    upstream_name = "TMDB"

    async def search_movies(self, query: str | None, page: int = 1) -> Any:
        return await self._search("movie", query, page)

    async def search_tv(self, query: str | None, page: int = 1) -> Any:
        return await self._search("tv", query, page)

    async def tv_detail(self, tv_id: str | None) -> Any:
        normalized_id = (tv_id or "").strip()
        if not normalized_id:
            raise InvalidRequest("TV ID is required", "Please provide a TV series ID")
        api_key = self._api_key()

        params = {
            "api_key": api_key,
            "language": self._settings.upstreams.tmdb_language,
            "append_to_response": "credits",
        }
        logger.info("tmdb_tv_detail_request", tv_id=normalized_id)
        return await self._get_json(self._url(f"tv/{quote(normalized_id, safe='')}"), params=params)

    async def _search(self, kind: str, query: str | None, page: int) -> Any:
        query = self._require_query(query)
        api_key = self._api_key()

        params = {
            "api_key": api_key,
            "query": query,
            "page": str(page),
            "language": self._settings.upstreams.tmdb_language,
        }
        logger.info("tmdb_search_request", kind=kind, query=query, page=page)
        return await self._get_json(self._url(f"search/{kind}"), params=params)

    def _api_key(self) -> str:
        return self._require_secret(
            self._settings.secrets.tmdb_api_key, "TMDB API key not configured"
        )

    def _url(self, path: str) -> str:
        return f"{str(self._settings.upstreams.tmdb_base_url).rstrip('/')}/{path}"


__all__ = ["TmdbService"]
