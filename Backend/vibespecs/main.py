# vibespecs/main.py
"""
VibeSpecs Backend - application factory.
"""
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from vibespecs import __version__
from vibespecs.api import auth, billing, health, prd, projects, templates
from vibespecs.api.errors import register_exception_handlers
from vibespecs.core.config import Settings, settings
from vibespecs.core.logging import log, log_section
from vibespecs.db import connect_db, disconnect_db
from vibespecs.lib.monitoring import register_monitoring
from vibespecs.services import ServiceContainer, build_container


def create_app(
    app_settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        app_settings: defaults to the environment-driven singleton
        container: pre-built services; built from app_settings when omitted
    """
    app_settings = app_settings or settings
    container = container or build_container(app_settings)

    # ---------------------------------------------------------------------------
    # LIFESPAN
    # ---------------------------------------------------------------------------

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_section("API", "🚀 VibeSpecs starting...")
        log("API", f"GEMINI_API_KEY loaded: {bool(app_settings.llm.gemini_api_key)}")
        log("API", f"OPENAI_API_KEY loaded: {bool(app_settings.llm.openai_api_key)}")
        log("API", f"Default provider: {app_settings.llm.default_provider}")

        if container.backend == "mongo":
            await connect_db(app_settings.storage)

        yield

        log("API", "🔌 Shutting down...")
        if container.backend == "mongo":
            await disconnect_db()

    app = FastAPI(
        title="VibeSpecs",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = app_settings

    # Monitoring
    register_monitoring(app)

    if app_settings.cors_origins == ["*"] and not app_settings.debug:
        log("API", "⚠️ [CORS] Using allow_origins=['*'] - consider setting CORS_ORIGINS in production")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate Limiting - per client IP, configured via RATE_LIMIT (e.g. "50/minute")
    limiter = Limiter(key_func=get_remote_address, default_limits=[app_settings.rate_limit])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    register_exception_handlers(app)

    # ---------------------------------------------------------------------------
    # API ROUTES
    # ---------------------------------------------------------------------------

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(projects.router)
    app.include_router(prd.router)
    app.include_router(templates.router)
    app.include_router(billing.router)

    return app


app = create_app()


# ---------------------------------------------------------------------------
# RUN
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "vibespecs.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
