"""FastAPI web application for the Debate Assistant."""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import AppConfig, get_default_config
from models.cache_manager import ResponseCache
from models.debate_generator import DebateGenerator
from models.groq_provider import GroqProvider
from storage import DebateStorage, MemoryStorage
from web.endpoints.debates import router as debates_router
from web.endpoints.generation import router as generation_router
from web.endpoints.system import router as system_router
from web.errors import register_exception_handlers

logger: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application lifespan - startup and shutdown."""
    logger.info(
        f"Debate Assistant started (model: {app.state.config.groq.model}, "
        f"storage: {type(app.state.storage).__name__})"
    )

    yield

    await app.state.provider.close()
    logger.info("Debate Assistant stopped")


def get_allowed_origins(config: AppConfig) -> list[str] | None:
    """Get CORS origins from environment or config, None for development defaults."""
    env_origins: str | None = os.environ.get("ALLOWED_ORIGINS")
    if env_origins:
        return [origin.strip() for origin in env_origins.split(",") if origin.strip()]
    return config.system.allowed_origins or None


def create_app(
    config: AppConfig | None = None,
    storage: DebateStorage | None = None,
    provider: GroqProvider | None = None,
) -> FastAPI:
    """Build the application with its services constructed once and shared by handlers."""
    config = config or get_default_config()
    storage = storage or MemoryStorage()
    provider = provider or GroqProvider(config.groq, config.generation)
    cache = ResponseCache()

    app = FastAPI(
        title="Debate Assistant",
        description="AI-generated debate points, rebuttals and counter-arguments",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.config = config
    app.state.storage = storage
    app.state.provider = provider
    app.state.cache = cache
    app.state.generator = DebateGenerator(provider, storage, cache, config.generation)

    allowed_origins = get_allowed_origins(config)
    if allowed_origins:
        logger.info(f"Setting CORS allowed origins: {allowed_origins}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        logger.info("No ALLOWED_ORIGINS set, using development CORS settings")
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(generation_router)
    app.include_router(debates_router)
    app.include_router(system_router)

    return app
