"""Melon song search scraped from the public search page."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any

import httpx
from bs4 import BeautifulSoup, Tag

from mediaproxy.config import MelonSettings
from mediaproxy.logging import logger
from mediaproxy.services.exceptions import UpstreamError
from mediaproxy.utils.retry import retry_async

_ALBUM_ID_RE = re.compile(r"goAlbumDetail\('?(\d+)'?\)")
_SONG_ID_RE = re.compile(r"playSong\('[^']*',\s*'?(\d+)'?\)")


class SearchSection(str, Enum):
    ALL = "all"
    ARTIST = "artist"
    SONG = "song"
    ALBUM = "album"


class MelonSearchClient:
    """Fetch and parse Melon's song search table.

    Transport failures and 5xx responses are retried with linear backoff;
    4xx responses fail immediately.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: MelonSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or MelonSettings()

    async def search_song(
        self, query: str, section: SearchSection = SearchSection.ALL
    ) -> list[dict[str, Any]]:
        params = {"q": query, "section": section.value, "searchGnbYn": "Y"}
        headers = {
            "User-Agent": self._settings.user_agent,
            "Accept-Language": "ko-KR,ko;q=0.9",
        }

        async def _request():
            response = await self._client.get(
                str(self._settings.search_url),
                params=params,
                headers=headers,
                timeout=self._settings.timeout_seconds,
            )
            if response.status_code >= 500:
                response.raise_for_status()
            return response

        try:
            response = await retry_async(
                _request,
                max_attempts=self._settings.max_attempts,
                base_delay=self._settings.base_delay_seconds,
                retry_on=(httpx.RequestError, httpx.HTTPStatusError),
                logger=logger,
                operation_name="melon_song_search",
            )
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise UpstreamError(
                "Melon API error", f"Melon search failed: {status_code}"
            ) from exc
        except httpx.RequestError as exc:
            raise UpstreamError("Melon API error", f"Melon search failed: {exc}") from exc

        if response.is_error:
            raise UpstreamError(
                "Melon API error",
                f"Melon search failed: {response.status_code} - {response.text[:500]}",
            )

        songs = parse_song_table(response.text)
        logger.info("melon_search_completed", query=query, results=len(songs))
        return songs


def parse_song_table(html: str) -> list[dict[str, Any]]:
    """Extract song rows from the search result markup."""

    soup = BeautifulSoup(html, "html.parser")
    container = soup.select_one("#frm_defaultList") or soup
    songs: list[dict[str, Any]] = []
    for row in container.select("table tbody tr"):
        song = _parse_row(row)
        if song is not None:
            songs.append(song)
    return songs


def _parse_row(row: Tag) -> dict[str, Any] | None:
    title_link = row.select_one("a.fc_gray")
    if title_link is None:
        return None
    title = title_link.get_text(strip=True)
    if not title:
        return None

    song_id = ""
    checkbox = row.select_one("input.input_check")
    if checkbox is not None and checkbox.get("value"):
        song_id = str(checkbox["value"])
    else:
        match = _SONG_ID_RE.search(title_link.get("href", ""))
        if match:
            song_id = match.group(1)

    artists: list[str] = []
    for link in row.select("#artistName > a"):
        name = link.get_text(strip=True)
        if name and name not in artists:
            artists.append(name)

    album = ""
    album_id = ""
    for link in row.select("a"):
        match = _ALBUM_ID_RE.search(link.get("href", ""))
        if match:
            album = link.get_text(strip=True)
            album_id = match.group(1)
            break

    return {
        "songId": song_id,
        "title": title,
        "artist": ", ".join(artists),
        "album": album,
        "albumId": album_id,
        # Melon's search table has no release column.
        "year": "",
    }


__all__ = ["MelonSearchClient", "SearchSection", "parse_song_table"]
