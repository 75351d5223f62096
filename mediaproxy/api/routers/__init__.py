from fastapi import APIRouter

from mediaproxy.api.routers import health, kmdb, naver, songs, tmdb


def setup_routers() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router)
    router.include_router(kmdb.router)
    router.include_router(tmdb.router)
    router.include_router(songs.router)
    router.include_router(naver.router)
    return router


__all__ = ["setup_routers"]
