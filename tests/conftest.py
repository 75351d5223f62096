"""Shared pytest fixtures for proxy service tests."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from mediaproxy.config import EnrichmentSettings, ProxySettings, UpstreamSecrets


@pytest.fixture
def make_settings():
    def _make(
        environment: str = "dev",
        max_concurrency: int = 5,
        **secrets: str,
    ) -> ProxySettings:
        return ProxySettings(
            _env_file=None,
            environment=environment,
            secrets=UpstreamSecrets(**{key: SecretStr(value) for key, value in secrets.items()}),
            enrichment=EnrichmentSettings(max_concurrency=max_concurrency),
        )

    return _make


@pytest.fixture
def no_sleep(monkeypatch):
    delays: list[float] = []

    async def _noop_sleep(delay):
        delays.append(delay)

    monkeypatch.setattr("mediaproxy.utils.retry.asyncio.sleep", _noop_sleep)
    return delays
