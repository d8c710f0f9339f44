"""wolgate FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.responses import FileResponse

from wolgate import __version__
from wolgate.config import Settings, get_settings
from wolgate.services import init_services
from wolgate.utils.log_setup import setup_logging

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info("wolgate v%s started — listening on %s:%s", __version__, settings.host, settings.port)
    try:
        yield
    finally:
        logger.info("wolgate shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Application factory. Settings and services live on ``app.state``."""
    from wolgate.api.routes import api_router

    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        debug=settings.debug,
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.wake_service = init_services(settings)

    app.include_router(api_router)

    _index = STATIC_DIR / "index.html"

    @app.get("/", include_in_schema=False)
    async def _index_page():
        return FileResponse(_index, media_type="text/html")

    return app


def run(**kwargs: Any) -> None:
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        **kwargs,
    )


if __name__ == "__main__":
    run()
