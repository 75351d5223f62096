"""Application entrypoint."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediaproxy.api.errors import register_exception_handlers
from mediaproxy.api.routers import setup_routers
from mediaproxy.config import ProxySettings, get_settings
from mediaproxy.logging import configure_logging, logger


def create_app(
    settings: ProxySettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Build the proxy application.

    A caller-supplied ``http_client`` is used as-is and left open on shutdown;
    otherwise the app owns a client for its lifetime.
    """

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = http_client or httpx.AsyncClient(
            timeout=settings.upstreams.request_timeout_seconds,
            follow_redirects=True,
        )
        app.state.http_client = client
        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()

    app = FastAPI(title="mediaproxy", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(setup_routers())
    return app


def main() -> None:
    configure_logging()
    settings = get_settings()
    app = create_app(settings)

    logger.info(
        "proxy_starting",
        environment=settings.environment,
        host=settings.host,
        port=settings.port,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
