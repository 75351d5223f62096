from __future__ import annotations

import httpx
import pytest

from mediaproxy.services.exceptions import ConfigurationError, InvalidRequest
from mediaproxy.services.naver import NaverBookService

CREDENTIALS = {"naver_client_id": "client-id", "naver_client_secret": "client-secret"}


@pytest.mark.asyncio
async def test_search_books_sends_credentials_as_headers(make_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["X-Naver-Client-Id"] == "client-id"
        assert request.headers["X-Naver-Client-Secret"] == "client-secret"
        assert "client-secret" not in str(request.url)
        params = request.url.params
        assert params["query"] == "채식주의자"
        assert params["display"] == "20"
        assert params["start"] == "1"
        assert params["sort"] == "sim"
        return httpx.Response(200, json={"total": 1, "items": [{"title": "채식주의자"}]})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = NaverBookService(client, settings=make_settings(**CREDENTIALS))
        payload = await service.search_books("채식주의자")

    assert payload == {"total": 1, "items": [{"title": "채식주의자"}]}


@pytest.mark.asyncio
async def test_search_books_forwards_paging_and_date_sort(make_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        assert (params["display"], params["start"], params["sort"]) == ("5", "11", "date")
        return httpx.Response(200, json={"items": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = NaverBookService(client, settings=make_settings(**CREDENTIALS))
        await service.search_books("소년이 온다", display=5, start=11, sort="date")


@pytest.mark.asyncio
async def test_search_books_rejects_unknown_sort(make_settings):
    async with httpx.AsyncClient() as client:
        service = NaverBookService(client, settings=make_settings(**CREDENTIALS))
        with pytest.raises(InvalidRequest):
            await service.search_books("책", sort="popularity")


@pytest.mark.asyncio
async def test_search_books_requires_both_credentials(make_settings):
    async with httpx.AsyncClient() as client:
        service = NaverBookService(client, settings=make_settings(naver_client_id="client-id"))
        with pytest.raises(ConfigurationError) as excinfo:
            await service.search_books("책")

    assert excinfo.value.error == "Naver API credentials not configured"
