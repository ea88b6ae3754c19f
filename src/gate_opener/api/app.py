"""
gate_opener.api.app

FastAPI app factory for the gate opening service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Make the settings instance available to request dependencies.
"""

from __future__ import annotations

from fastapi import FastAPI

from gate_opener import __version__
from gate_opener.api.routers.health import router as health_router
from gate_opener.api.routers.openings import router as openings_router
from gate_opener.observability.logging import configure_logging, get_logger
from gate_opener.observability.middleware import RequestContextMiddleware
from gate_opener.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Gate Opener",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    # Read by `api.deps.settings_dep`.
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(openings_router)

    @app.on_event("startup")
    async def _startup() -> None:
        log.info("startup", env=settings.env)

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        log.info("shutdown")

    return app
