"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from lumen.config import Settings, get_settings
from lumen.game.router import router as game_router
from lumen.health.router import router as health_router
from lumen.middleware import setup_middleware
from lumen.store import KVStore, build_store

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the configured store on startup (unless one was injected), close it on shutdown."""
    settings: Settings = app.state.settings
    owns_store = app.state.store is None
    if owns_store:
        app.state.store = build_store(settings)
        if app.state.store is None:
            logger.warning("store_unbound", backend=settings.store_backend)
        else:
            logger.info("store_opened", backend=settings.store_backend)

    yield

    if owns_store and app.state.store is not None:
        await app.state.store.close()
        app.state.store = None


def create_app(settings: Settings | None = None, store: KVStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Lumen API",
        description="Global city brightness game: purification, relay and leaderboards",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(game_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("lumen.main:app", host="0.0.0.0", port=8000)  # noqa: S104
