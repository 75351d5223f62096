"""TMDB pass-through routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from mediaproxy.api.dependencies import get_tmdb_service
from mediaproxy.api.errors import ERROR_RESPONSES, translate_errors
from mediaproxy.services.tmdb import TmdbService

router = APIRouter(prefix="/tmdb", tags=["tmdb"], responses=ERROR_RESPONSES)


@router.get("/search/movie")
async def search_movie(
    query: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    service: TmdbService = Depends(get_tmdb_service),
) -> Any:
    with translate_errors("Failed to search movies"):
        return await service.search_movies(query, page=page)


@router.get("/search/tv")
async def search_tv(
    query: str | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    service: TmdbService = Depends(get_tmdb_service),
) -> Any:
    with translate_errors("Failed to search series"):
        return await service.search_tv(query, page=page)


@router.get("/tv/{tv_id}")
async def tv_detail(
    tv_id: str,
    service: TmdbService = Depends(get_tmdb_service),
) -> Any:
    with translate_errors("Failed to get series details"):
        return await service.tv_detail(tv_id)
