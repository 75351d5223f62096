"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpstreamSecrets(BaseModel):
    kmdb_api_key: SecretStr | None = None
    tmdb_api_key: SecretStr | None = None
    lastfm_api_key: SecretStr | None = None
    naver_client_id: SecretStr | None = None
    naver_client_secret: SecretStr | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UpstreamSettings(BaseModel):
    kmdb_search_url: AnyHttpUrl = Field(
        default="http://api.koreafilm.or.kr/openapi-data2/wisenut/search_api/search_json2.jsp"
    )
    tmdb_base_url: AnyHttpUrl = Field(default="https://api.themoviedb.org/3")
    tmdb_language: str = Field(default="ko-KR", min_length=2)
    lastfm_base_url: AnyHttpUrl = Field(default="https://ws.audioscrobbler.com/2.0/")
    naver_book_url: AnyHttpUrl = Field(default="https://openapi.naver.com/v1/search/book.json")
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class MelonSettings(BaseModel):
    search_url: AnyHttpUrl = Field(default="https://www.melon.com/search/song/index.htm")
    timeout_seconds: int = Field(default=15, ge=1, le=120)
    max_attempts: int = Field(default=3, ge=1, le=10)
    base_delay_seconds: float = Field(default=1.0, ge=0)
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )


class EnrichmentSettings(BaseModel):
    max_concurrency: int = Field(default=5, ge=1, le=50)


class ProxySettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PROXY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    secrets: UpstreamSecrets = Field(default_factory=UpstreamSecrets)
    upstreams: UpstreamSettings = Field(default_factory=UpstreamSettings)
    melon: MelonSettings = Field(default_factory=MelonSettings)
    enrichment: EnrichmentSettings = Field(default_factory=EnrichmentSettings)

    @property
    def expose_error_details(self) -> bool:
        """Upstream diagnostics are kept out of production responses."""

        return self.environment != "prod"


@lru_cache
def get_settings() -> ProxySettings:
    """Return cached settings instance."""

    return ProxySettings()


__all__ = [
    "EnrichmentSettings",
    "MelonSettings",
    "ProxySettings",
    "UpstreamSecrets",
    "UpstreamSettings",
    "get_settings",
]
