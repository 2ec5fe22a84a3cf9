"""
HTTP front-end: GET /api/news plus the static frontend build at /.
"""
from pathlib import Path
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import Settings, get_settings
from .core import NewsScraper
from .logging_config import configure_logging

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None, scraper: Optional[NewsScraper] = None) -> FastAPI:
    settings = settings or get_settings()
    # Builds the QuerySet; a ConfigurationError here aborts startup
    scraper = scraper or NewsScraper(
        url=settings.source_url,
        origin=settings.site_origin,
        limit=settings.max_items,
        timeout=settings.request_timeout,
    )

    app = FastAPI(title="Corriere News")
    app.state.scraper = scraper

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["authorization", "content-type"],
    )

    @app.get("/api/news")
    async def get_news(request: Request):
        response = await request.app.state.scraper.fetch()
        return response.to_dict()

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("static_dir_missing", path=str(static_dir))

    return app


def run() -> None:
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings)
    logger.info("server_starting", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
