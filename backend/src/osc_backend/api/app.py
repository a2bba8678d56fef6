"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from osc_backend.api.error_handlers import register_error_handlers
from osc_backend.api.routers import calendar_router, health_router, team_member_router
from osc_backend.observability import setup_logging
from osc_backend.settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Install logging once the server starts, not at import time."""
    config = get_settings()
    setup_logging(config.log_level, config.log_format)
    yield


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = get_settings()

    app = FastAPI(title="OSC API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(calendar_router)
    app.include_router(team_member_router)
    return app
