"""Upstream credentials must stay out of log output."""

from __future__ import annotations

import logging

import httpx
import pytest
import structlog

from mediaproxy.logging import (
    HTTP_CLIENT_LOGGERS,
    RedactSecretsFilter,
    configure_logging,
    redact_secrets,
)
from mediaproxy.services.tmdb import TmdbService


@pytest.fixture
def restore_http_loggers():
    saved = {name: logging.getLogger(name).level for name in HTTP_CLIENT_LOGGERS}
    yield
    for name, level in saved.items():
        client_logger = logging.getLogger(name)
        client_logger.setLevel(level)
        for item in list(client_logger.filters):
            if isinstance(item, RedactSecretsFilter):
                client_logger.removeFilter(item)
    structlog.reset_defaults()


async def _search_tmdb(make_settings) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"results": []})

    transport = httpx.MockTransport(handler)
    async with httpx.AsyncClient(transport=transport) as client:
        service = TmdbService(client, settings=make_settings(tmdb_api_key="TOPSECRET123"))
        await service.search_movies("parasite")


@pytest.mark.asyncio
async def test_configure_logging_keeps_api_key_out_of_request_logs(
    make_settings, caplog, capfd, restore_http_loggers
):
    configure_logging()

    await _search_tmdb(make_settings)

    captured = capfd.readouterr()
    assert "TOPSECRET123" not in caplog.text
    assert "TOPSECRET123" not in captured.out + captured.err
    assert logging.getLogger("httpx").getEffectiveLevel() >= logging.WARNING


@pytest.mark.asyncio
async def test_request_logs_are_redacted_when_verbose(make_settings, caplog, restore_http_loggers):
    configure_logging()
    caplog.set_level(logging.INFO, logger="httpx")

    await _search_tmdb(make_settings)

    assert "HTTP Request" in caplog.text
    assert "api_key=***" in caplog.text
    assert "TOPSECRET123" not in caplog.text


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("GET https://x/?api_key=abc&query=q", "GET https://x/?api_key=***&query=q"),
        ("GET http://kmdb/?query=q&ServiceKey=K-1", "GET http://kmdb/?query=q&ServiceKey=***"),
        ("client_secret=s3cr3t \"HTTP/1.1 200\"", "client_secret=*** \"HTTP/1.1 200\""),
        ("no secrets here", "no secrets here"),
    ],
)
def test_redact_secrets(raw, expected):
    assert redact_secrets(raw) == expected
