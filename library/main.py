"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), error handlers, startup (ES index) and shutdown (clients).
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from elasticsearch import ApiError, TransportError
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from library import __version__
from library.api.router import api_router
from library.cache.redis_client import close_redis
from library.config import get_settings
from library.core.exceptions import register_exception_handlers
from library.search.elasticsearch_client import close_elasticsearch, ensure_books_index

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: ensure Elasticsearch index when ES is available. Shutdown: close store clients."""
    try:
        await ensure_books_index()
    except (ApiError, TransportError) as e:
        # ES may still be starting; book calls fail with 500 until it answers
        logger.warning("could not ensure books index: %s", e)
    yield
    await close_elasticsearch()
    await close_redis()


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        description="Books catalog CRUD on Elasticsearch with per-user activity in Redis.",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn: `library-api` or `python -m library.main`."""
    settings = get_settings()
    uvicorn.run(
        "library.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
