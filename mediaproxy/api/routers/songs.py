"""Song search routes (Melon + Last.fm album art)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from mediaproxy.api.dependencies import get_song_service
from mediaproxy.api.errors import ERROR_RESPONSES, translate_errors
from mediaproxy.services.songs import SongSearchService

router = APIRouter(prefix="/melona", tags=["songs"], responses=ERROR_RESPONSES)


@router.get("/search/song")
async def search_song(
    query: str | None = Query(default=None),
    service: SongSearchService = Depends(get_song_service),
) -> list[dict[str, Any]]:
    with translate_errors("Failed to search songs"):
        return await service.search(query)
