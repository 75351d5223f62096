"""Logging setup for the proxy: structlog JSON events, credential-safe stdlib logs."""

from __future__ import annotations

import logging
import re

import structlog

# Query-string parameters that carry upstream credentials.
SECRET_QUERY_PARAMS = ("api_key", "ServiceKey", "client_id", "client_secret")
HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")

_SECRET_PARAM_RE = re.compile(
    r"(?i)\b((?:%s)=)[^&\s\"']+" % "|".join(re.escape(name) for name in SECRET_QUERY_PARAMS)
)


def redact_secrets(text: str) -> str:
    return _SECRET_PARAM_RE.sub(r"\1***", text)


class RedactSecretsFilter(logging.Filter):
    """Rewrite a record so upstream URLs never carry credential values."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_secrets(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def quiet_http_clients(level: int = logging.WARNING) -> None:
    """httpx logs every request URL at INFO; keep it above that and redact anyway."""

    for name in HTTP_CLIENT_LOGGERS:
        client_logger = logging.getLogger(name)
        client_logger.setLevel(max(level, logging.WARNING))
        if not any(isinstance(item, RedactSecretsFilter) for item in client_logger.filters):
            client_logger.addFilter(RedactSecretsFilter())


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    quiet_http_clients()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()

__all__ = [
    "RedactSecretsFilter",
    "configure_logging",
    "logger",
    "quiet_http_clients",
    "redact_secrets",
]
