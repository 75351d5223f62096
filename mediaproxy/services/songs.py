"""Song search: Melon results optionally enriched with Last.fm album art."""

from __future__ import annotations

import asyncio
from typing import Any, Protocol

import httpx

from mediaproxy.config import ProxySettings
from mediaproxy.logging import logger
from mediaproxy.services.exceptions import PartialEnrichmentFailure
from mediaproxy.services.lastfm import AlbumArtResolver
from mediaproxy.services.melon import SearchSection
from mediaproxy.services.upstream import read_secret, require_query


class SongSource(Protocol):
    async def search_song(
        self, query: str, section: SearchSection = SearchSection.ALL
    ) -> list[dict[str, Any]]: ...


class SongSearchService:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        song_source: SongSource,
        settings: ProxySettings | None = None,
    ) -> None:
        self._client = http_client
        self._source = song_source
        self._settings = settings or ProxySettings()

    async def search(self, query: str | None) -> list[dict[str, Any]]:
        query = require_query(query)

        songs = await self._source.search_song(query, SearchSection.ALL)

        api_key = read_secret(self._settings.secrets.lastfm_api_key)
        logger.info("song_search_completed", query=query, results=len(songs), enrich=bool(api_key))
        if not api_key:
            return songs

        resolver = AlbumArtResolver(self._client, api_key, settings=self._settings.upstreams)
        return await self.enrich(songs, resolver)

    async def enrich(
        self, songs: list[dict[str, Any]], resolver: AlbumArtResolver
    ) -> list[dict[str, Any]]:
        """Resolve album art for every song, at most ``max_concurrency`` at once.

        Waits for every lookup; a failed lookup yields the original song.
        """

        semaphore = asyncio.Semaphore(self._settings.enrichment.max_concurrency)

        async def _enrich_one(song: dict[str, Any]) -> dict[str, Any]:
            async with semaphore:
                try:
                    album_img = await resolver.resolve(song)
                except Exception as exc:
                    failure = (
                        exc
                        if isinstance(exc, PartialEnrichmentFailure)
                        else PartialEnrichmentFailure("Album art lookup failed", str(exc))
                    )
                    logger.warning(
                        "album_art_enrichment_failed",
                        title=song.get("title"),
                        error=failure.message,
                    )
                    return song
            return {**song, "albumImg": album_img}

        return list(await asyncio.gather(*(_enrich_one(song) for song in songs)))


__all__ = ["SongSearchService", "SongSource"]
