"""Naver book search routes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from mediaproxy.api.dependencies import get_naver_service
from mediaproxy.api.errors import ERROR_RESPONSES, translate_errors
from mediaproxy.services.naver import DEFAULT_DISPLAY, DEFAULT_SORT, DEFAULT_START, NaverBookService

# Naver's documented paging limits, checked here so bad values never leave the proxy.
MAX_DISPLAY = 100
MAX_START = 1000

router = APIRouter(prefix="/naver", tags=["naver"], responses=ERROR_RESPONSES)


@router.get("/search/book")
async def search_book(
    query: str | None = Query(default=None),
    display: int = Query(
        default=DEFAULT_DISPLAY,
        ge=1,
        le=MAX_DISPLAY,
        description=f"Results per page, 1-{MAX_DISPLAY}. Enforced by the proxy; out of range is a 400.",
    ),
    start: int = Query(
        default=DEFAULT_START,
        ge=1,
        le=MAX_START,
        description=f"1-based result offset, 1-{MAX_START}. Enforced by the proxy; out of range is a 400.",
    ),
    sort: str = Query(default=DEFAULT_SORT),
    service: NaverBookService = Depends(get_naver_service),
) -> Any:
    """Search Naver books and return Naver's payload unchanged.

    ``display`` and ``start`` are range-checked locally against Naver's
    paging limits before any upstream call is made.
    """
    with translate_errors("Failed to search books"):
        return await service.search_books(query, display=display, start=start, sort=sort)
