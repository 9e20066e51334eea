"""FastAPI application entry point."""
from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ielts_writer.api import essays, health, prompts, scoring
from ielts_writer.api.errors import register_error_handlers
from ielts_writer.container import Container, build_container
from ielts_writer.core import config
from ielts_writer.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Build an app that owns `container` (a fresh in-memory one by default)."""
    # ------------------------------------------------------------------
    # App creation
    # ------------------------------------------------------------------
    app = FastAPI(
        title=config.APP_TITLE,
        description="Essay store and AI scoring API for IELTS Task 2 practice",
        version=config.APP_VERSION,
    )
    app.state.container = container or build_container()

    # CORS — allow everything for local dev (restrict with CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # ------------------------------------------------------------------
    # Lifecycle: the container lives exactly as long as the app
    # ------------------------------------------------------------------
    @app.on_event("startup")
    def on_startup():
        prompts_loaded = len(app.state.container.prompt_repo.list_all())
        logger.info("Essay store ready (%d prompts seeded)", prompts_loaded)
        if not app.state.container.oracle.is_configured:
            logger.warning("OPENROUTER_API_KEY is not set; essay scoring will fail")

    @app.on_event("shutdown")
    def on_shutdown():
        app.state.container.close()

    # ------------------------------------------------------------------
    # Routers
    # ------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(essays.router)
    app.include_router(prompts.router)
    app.include_router(scoring.router)
    return app


def serve() -> None:
    """Console entry point: run the API with uvicorn."""
    import uvicorn

    setup_logging()
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    serve()
