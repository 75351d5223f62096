"""Album art lookup against the Last.fm API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

import httpx

from mediaproxy.config import UpstreamSettings
from mediaproxy.logging import logger
from mediaproxy.services.exceptions import PartialEnrichmentFailure


@dataclass(frozen=True, slots=True)
class ArtTier:
    """One lookup in the fallback chain.

    ``params`` builds the Last.fm query from a song; ``extract`` pulls the
    image list out of the decoded response.
    """

    name: str
    params: Callable[[Mapping[str, Any]], dict[str, str] | None]
    extract: Callable[[Any], Any]


def _track_params(song: Mapping[str, Any]) -> dict[str, str] | None:
    artist, title = _field(song, "artist"), _field(song, "title")
    if not artist or not title:
        return None
    return {"method": "track.getinfo", "artist": artist, "track": title}


def _album_params(song: Mapping[str, Any]) -> dict[str, str] | None:
    album = _field(song, "album")
    if not album:
        return None
    return {"method": "album.search", "album": album}


def _artist_params(song: Mapping[str, Any]) -> dict[str, str] | None:
    artist = _field(song, "artist")
    if not artist:
        return None
    return {"method": "artist.getinfo", "artist": artist}


def _track_images(data: Any) -> Any:
    return _dig(data, "track", "album", "image")


def _album_images(data: Any) -> Any:
    albums = _dig(data, "results", "albummatches", "album")
    if isinstance(albums, list) and albums:
        return _dig(albums[0], "image")
    return None


def _artist_images(data: Any) -> Any:
    return _dig(data, "artist", "image")


DEFAULT_TIERS: tuple[ArtTier, ...] = (
    ArtTier("track", _track_params, _track_images),
    ArtTier("album", _album_params, _album_images),
    ArtTier("artist", _artist_params, _artist_images),
)


class AlbumArtResolver:
    """Try each tier in order and return the first non-empty image URL."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: str,
        settings: UpstreamSettings | None = None,
        tiers: Sequence[ArtTier] = DEFAULT_TIERS,
    ) -> None:
        self._client = http_client
        self._api_key = api_key
        self._settings = settings or UpstreamSettings()
        self._tiers = tuple(tiers)

    async def resolve(self, song: Mapping[str, Any]) -> str:
        for tier in self._tiers:
            params = tier.params(song)
            if params is None:
                continue
            data = await self._lookup(tier.name, params)
            image = largest_image(tier.extract(data)) if data is not None else ""
            if image:
                logger.debug("album_art_resolved", tier=tier.name, title=_field(song, "title"))
                return image
        return ""

    async def _lookup(self, tier: str, params: dict[str, str]) -> Any:
        query = {**params, "api_key": self._api_key, "format": "json"}
        try:
            response = await self._client.get(
                str(self._settings.lastfm_base_url),
                params=query,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise PartialEnrichmentFailure(
                "Album art lookup failed", f"Last.fm {tier} lookup failed: {exc}"
            ) from exc

        if response.is_error:
            return None
        try:
            return response.json()
        except ValueError:
            return None


def largest_image(images: Any) -> str:
    """Last.fm lists sizes small to large; take the last entry's URL."""

    if not isinstance(images, list) or not images:
        return ""
    last = images[-1]
    if not isinstance(last, dict):
        return ""
    url = last.get("#text")
    return url if isinstance(url, str) else ""


def _dig(data: Any, *keys: str) -> Any:
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def _field(song: Mapping[str, Any], key: str) -> str:
    value = song.get(key)
    return str(value).strip() if value else ""


__all__ = ["AlbumArtResolver", "ArtTier", "DEFAULT_TIERS", "largest_image"]
