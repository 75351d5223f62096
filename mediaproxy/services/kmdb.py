"""Korean Film Database (KMDB) search with normalization into the movie shape."""

from __future__ import annotations

from typing import Any

from mediaproxy.domain.models import MovieResult, MovieSearchResponse
from mediaproxy.logging import logger
from mediaproxy.services.upstream import _BaseUpstreamService
from mediaproxy.utils.text import as_text, first_segment, strip_markup

KMDB_COLLECTION = "kmdb_new2"
KMDB_LIST_COUNT = 20


class KmdbService(_BaseUpstreamService):
    upstream_name = "KMDB"

    async def search_movies(self, query: str | None) -> MovieSearchResponse:
        query = self._require_query(query)
        api_key = self._require_secret(
            self._settings.secrets.kmdb_api_key, "KMDB API key not configured"
        )

        params = {
            "collection": KMDB_COLLECTION,
            "query": query,
            "detail": "Y",
            "listCount": str(KMDB_LIST_COUNT),
            "ServiceKey": api_key,
        }
        logger.info("kmdb_search_request", query=query)
        payload = await self._get_json(str(self._settings.upstreams.kmdb_search_url), params=params)
        return normalize_search_payload(payload)


def normalize_search_payload(payload: Any) -> MovieSearchResponse:
    """Map a raw KMDB response into ``{results, totalResults}``.

    Total over every shape: missing or mistyped containers fall back to an
    empty list and a zero count.
    """

    root = _as_dict(payload)
    data_entries = _as_list(root.get("Data"))
    first_data = _as_dict(data_entries[0]) if data_entries else {}

    records = _as_list(first_data.get("Result"))
    total = first_data.get("TotalCount") or root.get("TotalCount") or 0
    return MovieSearchResponse(
        results=[normalize_movie(record) for record in records],
        totalResults=_to_int(total),
    )


def normalize_movie(record: Any) -> MovieResult:
    movie = _as_dict(record)

    title = strip_markup(movie.get("title"))
    original_title = strip_markup(movie.get("titleEng") or movie.get("titleOrg")) or title

    director = _first_entry(movie, "directors", "director")
    actors = _nested_list(movie, "actors", "actor")
    plot = _first_entry(movie, "plots", "plot")
    rating_entry = _first_entry(movie, "ratings", "rating")

    actor_names = [
        as_text(actor.get("actorNm")).strip()
        for actor in (_as_dict(item) for item in actors)
        if actor.get("actorNm")
    ]

    return MovieResult(
        id=as_text(movie.get("movieSeq") or movie.get("DOCID")),
        title=title,
        original_title=original_title,
        overview=as_text(plot.get("plotText")),
        poster_path=first_segment(movie.get("posters")),
        backdrop_path=first_segment(movie.get("stlls")),
        release_date=as_text(movie.get("repRlsDate") or movie.get("prodYear")),
        vote_average=0,
        director=as_text(director.get("directorNm")),
        actors=", ".join(actor_names),
        runtime=as_text(movie.get("runtime")),
        rating=as_text(rating_entry.get("ratingGrade") or movie.get("rating")),
        year=as_text(movie.get("prodYear")),
        genre=as_text(movie.get("genre")),
        nation=as_text(movie.get("nation")),
    )


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _nested_list(movie: dict[str, Any], outer: str, inner: str) -> list[Any]:
    return _as_list(_as_dict(movie.get(outer)).get(inner))


def _first_entry(movie: dict[str, Any], outer: str, inner: str) -> dict[str, Any]:
    entries = _nested_list(movie, outer, inner)
    return _as_dict(entries[0]) if entries else {}


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


__all__ = ["KmdbService", "normalize_movie", "normalize_search_payload"]
