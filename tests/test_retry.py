from __future__ import annotations

import httpx
import pytest

from mediaproxy.utils.retry import retry_async


class FlakyOperation:
    def __init__(self, failures: int, exc: Exception):
        self.calls = 0
        self.failures = failures
        self.exc = exc

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.exc
        return "ok"


@pytest.mark.asyncio
async def test_retry_succeeds_after_failures(no_sleep):
    operation = FlakyOperation(2, httpx.ConnectError("boom"))

    result = await retry_async(operation, max_attempts=3, base_delay=1.0)

    assert result == "ok"
    assert operation.calls == 3
    assert no_sleep == [1.0, 2.0]


@pytest.mark.asyncio
async def test_retry_raises_after_last_attempt(no_sleep):
    operation = FlakyOperation(5, httpx.ConnectError("boom"))

    with pytest.raises(httpx.ConnectError):
        await retry_async(operation, max_attempts=3, base_delay=0.5)

    assert operation.calls == 3
    assert len(no_sleep) == 2


@pytest.mark.asyncio
async def test_retry_only_on_listed_exceptions(no_sleep):
    operation = FlakyOperation(1, ValueError("bad"))

    with pytest.raises(ValueError):
        await retry_async(operation, max_attempts=3, retry_on=(httpx.RequestError,))

    assert operation.calls == 1
    assert no_sleep == []


@pytest.mark.asyncio
async def test_retry_rejects_zero_attempts():
    with pytest.raises(ValueError):
        await retry_async(FlakyOperation(0, RuntimeError()), max_attempts=0)
