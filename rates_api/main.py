"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cnb_fixing import RateProvider
from rates_api.api.errors import register_error_handlers
from rates_api.api.routes import api_router
from rates_api.config import AppSettings, get_settings
from rates_api.core.logging import setup_logging
from rates_api.core.telemetry import setup_telemetry
from rates_api.schemas import HealthResponse
from rates_api.services.rates import build_rate_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    settings: AppSettings = app.state.settings
    logger.info("Rates service configuration: %s", settings.dict_for_logging())
    yield


def create_app(settings: AppSettings | None = None, provider: RateProvider | None = None) -> FastAPI:
    """Build the application around a rate provider."""

    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=_lifespan)
    app.state.settings = settings
    app.state.rate_provider = provider or build_rate_provider(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        """Report cache freshness without touching the feed."""

        rate_provider: RateProvider = app.state.rate_provider
        state = rate_provider.state
        return HealthResponse(
            status="ok",
            timestamp=datetime.now(timezone.utc),
            timezone=settings.feed_timezone,
            last_refreshed_at=state.refreshed_at,
            cache_valid=state.valid,
            refresh_in_progress=rate_provider.refresh_in_progress,
        )

    setup_telemetry(app, settings)
    return app


app = create_app()


def run() -> None:
    """Serve :data:`app` with uvicorn on the configured host and port."""

    import uvicorn

    settings = app.state.settings
    logger.info("Server is running at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

__all__ = ["app", "create_app", "run"]
