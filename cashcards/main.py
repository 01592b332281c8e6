import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from cashcards import __version__
from cashcards.api import create_api_router
from cashcards.core.config import get_settings
from cashcards.core.logging import setup_logging
from cashcards.infrastructure.database import dispose_engine, init_db
from cashcards.interfaces.http.errors import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Cash card service started")
    yield
    logger.info("Cash card service shutting down")
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.file)

    app = FastAPI(
        title=settings.project_name,
        description="Owner-scoped cash card records",
        version=__version__,
        lifespan=lifespan,
    )
    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("cashcards.main:app", host=settings.host, port=settings.port, reload=settings.server.reload)
