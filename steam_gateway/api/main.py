"""
FastAPI Application Main
Hauptanwendung für das Steam Profile Gateway
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from steam_gateway.api.models import HealthResponse
from steam_gateway.apps.profile_app import SteamProfileApp, build_profile_app
from steam_gateway.common.http import create_session
from steam_gateway.core.config import Settings


def create_fastapi_app(settings: Settings, *, profile_app: Optional[SteamProfileApp] = None) -> FastAPI:
    """Factory function to create the FastAPI app.

    When ``profile_app`` is injected (tests, embedding) no aiohttp session is
    created; otherwise the lifespan owns one shared session for all upstream
    calls and closes it on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application Lifespan Management"""
        logger = logging.getLogger(__name__)
        logger.info("Starting Steam Profile Gateway")

        session = None
        if profile_app is None:
            if not settings.steam_api_key:
                logger.warning("STEAM_API_KEY is not set; Steam Web API calls will be rejected")
            session = create_session(settings)
            app.state.profile_app = build_profile_app(settings, session)
        else:
            app.state.profile_app = profile_app

        logger.info("Application startup complete")
        yield

        logger.info("Shutting down application")
        await app.state.profile_app.drain()
        if session is not None:
            await session.close()

    app = FastAPI(
        title="Steam Profile Gateway",
        description="Aggregates Steam profile, friends, games and achievements into one response",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Basic health check endpoint"""
        return HealthResponse(status="healthy", timestamp=datetime.now())

    from steam_gateway.api.router import api_router

    app.include_router(api_router)

    # Static front-end last: a mount at "/" would shadow every route after it
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logging.getLogger(__name__).info(f"Static directory {static_dir} not found; not serving assets")

    return app
