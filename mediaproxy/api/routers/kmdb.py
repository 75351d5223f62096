"""Korean film search routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from mediaproxy.api.dependencies import get_kmdb_service
from mediaproxy.api.errors import ERROR_RESPONSES, translate_errors
from mediaproxy.domain.models import MovieSearchResponse
from mediaproxy.services.kmdb import KmdbService

router = APIRouter(prefix="/kmdb", tags=["kmdb"], responses=ERROR_RESPONSES)


@router.get("/search/movie", response_model=MovieSearchResponse)
async def search_movie(
    query: str | None = Query(default=None),
    service: KmdbService = Depends(get_kmdb_service),
) -> MovieSearchResponse:
    with translate_errors("Failed to search movies"):
        return await service.search_movies(query)
