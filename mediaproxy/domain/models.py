"""Pydantic models for normalized proxy responses."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MovieResult(BaseModel):
    id: str = ""
    title: str = ""
    original_title: str = ""
    overview: str = ""
    poster_path: str = ""
    backdrop_path: str = ""
    release_date: str = ""
    vote_average: int = 0
    director: str = ""
    actors: str = ""
    runtime: str = ""
    rating: str = ""
    year: str = ""
    genre: str = ""
    nation: str = ""


class MovieSearchResponse(BaseModel):
    results: list[MovieResult] = Field(default_factory=list)
    totalResults: int = 0


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    status: str = "OK"


__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MovieResult",
    "MovieSearchResponse",
]
