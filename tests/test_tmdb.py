from __future__ import annotations

import httpx
import pytest

from mediaproxy.services.exceptions import ConfigurationError, InvalidRequest, UpstreamError
from mediaproxy.services.tmdb import TmdbService


@pytest.mark.asyncio
async def test_search_movies_passes_through_body(make_settings):
    body = {"page": 2, "results": [{"id": 496243, "title": "기생충"}], "total_results": 1}

    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/3/search/movie"
        assert request.url.params["api_key"] == "tmdb-key"
        assert request.url.params["query"] == "parasite"
        assert request.url.params["page"] == "2"
        assert request.url.params["language"] == "ko-KR"
        return httpx.Response(200, json=body)

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="tmdb-key"))
        payload = await service.search_movies("parasite", page=2)

    assert payload == body


@pytest.mark.asyncio
async def test_search_tv_defaults_to_first_page(make_settings):
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        return httpx.Response(200, json={"results": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="tmdb-key"))
        payload = await service.search_tv("미생")

    assert payload == {"results": []}
    assert requested[0].path == "/3/search/tv"
    assert requested[0].params["page"] == "1"


@pytest.mark.asyncio
async def test_tv_detail_requests_credits(make_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/3/tv/1396"
        assert request.url.params["append_to_response"] == "credits"
        assert request.url.params["language"] == "ko-KR"
        return httpx.Response(200, json={"id": 1396, "credits": {"cast": [{"name": "Bryan"}]}})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="tmdb-key"))
        payload = await service.tv_detail("1396")

    assert payload["credits"]["cast"][0]["name"] == "Bryan"


@pytest.mark.asyncio
async def test_tv_detail_requires_identifier(make_settings):
    async with httpx.AsyncClient() as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="tmdb-key"))
        with pytest.raises(InvalidRequest) as excinfo:
            await service.tv_detail("  ")

    assert excinfo.value.error == "TV ID is required"


@pytest.mark.asyncio
async def test_search_requires_api_key(make_settings):
    async with httpx.AsyncClient() as client:
        service = TmdbService(client, settings=make_settings())
        with pytest.raises(ConfigurationError):
            await service.search_movies("parasite")


@pytest.mark.asyncio
async def test_search_reports_upstream_status(make_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"status_message": "Invalid API key"})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="tmdb-key"))
        with pytest.raises(UpstreamError) as excinfo:
            await service.search_tv("미생")

    assert excinfo.value.message.startswith("TMDB API error: 401")
