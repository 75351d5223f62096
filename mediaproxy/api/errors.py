"""Error translation and JSON error rendering at the HTTP boundary."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mediaproxy.domain.models import ErrorResponse
from mediaproxy.logging import logger
from mediaproxy.services.exceptions import (
    ConfigurationError,
    InvalidRequest,
    ProxyError,
    UpstreamError,
)

ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid parameter"},
    500: {"model": ErrorResponse, "description": "Configuration or upstream failure"},
}


@contextmanager
def translate_errors(error_label: str) -> Iterator[None]:
    """Normalize anything a handler raises into the proxy error taxonomy.

    Client and configuration errors pass through untouched; upstream failures
    are relabelled for the endpoint and every other exception becomes an
    ``UpstreamError``.
    """

    try:
        yield
    except (InvalidRequest, ConfigurationError):
        raise
    except UpstreamError as exc:
        raise UpstreamError(error_label, exc.message) from exc
    except Exception as exc:
        logger.exception("handler_failed", error_label=error_label)
        raise UpstreamError(error_label, str(exc)) from exc


def _expose_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(getattr(settings, "expose_error_details", False))


async def handle_proxy_error(request: Request, exc: ProxyError) -> JSONResponse:
    body: dict[str, str] = {"error": exc.error}
    if exc.message and (exc.status_code < 500 or _expose_details(request)):
        body["message"] = exc.message

    log = logger.info if exc.status_code < 500 else logger.error
    log(
        "request_failed",
        path=request.url.path,
        status_code=exc.status_code,
        error_type=exc.__class__.__name__,
        error=exc.error,
    )
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for item in exc.errors():
        location = ".".join(str(part) for part in item.get("loc", ()) if part != "query")
        problems.append(f"{location}: {item.get('msg', 'invalid value')}")
    return await handle_proxy_error(
        request,
        InvalidRequest("Invalid request parameters", "; ".join(problems) or None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_exception", path=request.url.path)
    body = {"error": "Internal Server Error"}
    if _expose_details(request):
        body["message"] = str(exc)
    return JSONResponse(status_code=500, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProxyError, handle_proxy_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


__all__ = ["ERROR_RESPONSES", "register_exception_handlers", "translate_errors"]
