from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from routers import build_chat_router, build_health_router, build_widget_router
from services import GeminiRelayClient
from settings import Settings


logger = logging.getLogger("cybersec-tutor.app")


def create_app(settings: Settings, relay_client: GeminiRelayClient) -> FastAPI:
    """Assemble the HTTP front door around an already configured relay client."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        yield
        await relay_client.aclose()

    app = FastAPI(
        title="Cybersecurity Tutor Chat API",
        version="0.1.0",
        description="Relays widget chat messages to Gemini with a cybersecurity tutor persona.",
        lifespan=lifespan,
    )

    # Public embeddable widget: any origin may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(build_health_router(settings.service_name))
    app.include_router(build_chat_router(relay_client))
    app.include_router(build_widget_router(settings.widget_path))
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    logger.debug("Application assembled (static_dir=%s)", settings.static_dir)
    return app
