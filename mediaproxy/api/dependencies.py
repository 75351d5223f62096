"""FastAPI dependencies wiring settings and the shared HTTP client into services."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from mediaproxy.config import ProxySettings
from mediaproxy.services.kmdb import KmdbService
from mediaproxy.services.melon import MelonSearchClient
from mediaproxy.services.naver import NaverBookService
from mediaproxy.services.songs import SongSearchService, SongSource
from mediaproxy.services.tmdb import TmdbService


def get_proxy_settings(request: Request) -> ProxySettings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_kmdb_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: ProxySettings = Depends(get_proxy_settings),
) -> KmdbService:
    return KmdbService(client, settings=settings)


def get_tmdb_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: ProxySettings = Depends(get_proxy_settings),
) -> TmdbService:
    return TmdbService(client, settings=settings)


def get_naver_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: ProxySettings = Depends(get_proxy_settings),
) -> NaverBookService:
    return NaverBookService(client, settings=settings)


def get_song_source(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: ProxySettings = Depends(get_proxy_settings),
) -> SongSource:
    return MelonSearchClient(client, settings=settings.melon)


def get_song_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    source: SongSource = Depends(get_song_source),
    settings: ProxySettings = Depends(get_proxy_settings),
) -> SongSearchService:
    return SongSearchService(client, source, settings=settings)


__all__ = [
    "get_http_client",
    "get_kmdb_service",
    "get_naver_service",
    "get_proxy_settings",
    "get_song_service",
    "get_song_source",
    "get_tmdb_service",
]
