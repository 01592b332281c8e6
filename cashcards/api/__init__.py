from fastapi import APIRouter

from cashcards.interfaces.http.routers import auth, cashcards, health


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["health"])
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(cashcards.router, prefix="/cashcards", tags=["cashcards"])
    return router


__all__ = [
    "create_api_router",
]
