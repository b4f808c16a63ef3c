"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error pipeline (conversion and response stages)
- Security middleware (headers, rate limiting)
- Access logging
- Logging configuration
- Database engine and session factory

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from userbase.core.config import Settings, settings as default_settings
from userbase.infrastructure.db import build_engine, build_session_factory, create_schema
from userbase.interfaces.health import router as health_router
from userbase.interfaces.users.router import build_auth_router, router as users_router
from userbase.shared.access_log import AccessLogMiddleware
from userbase.shared.errors.handlers import register_error_handlers
from userbase.shared.logging import configure_logging
from userbase.shared.security.headers import SecurityHeadersMiddleware
from userbase.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: create tables on startup, release the pool on shutdown."""
    engine = app.state.engine
    create_schema(engine)

    yield

    engine.dispose()
    logger.info("Database engine disposed.")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, the error pipeline, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Application settings. Defaults to the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = settings

    # --- Database ---
    app.state.engine = build_engine(settings.get_database_url())
    app.state.session_factory = build_session_factory(app.state.engine)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)

    # --- Error Pipeline (innermost, so the middleware below sees its responses) ---
    register_error_handlers(app, settings)

    # --- Security Middleware ---
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Access Log (outermost) ---
    app.add_middleware(AccessLogMiddleware)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")
    app.include_router(
        build_auth_router(app.state.limiter, settings.rate_limit_login),
        prefix="/api/v1",
    )

    logger.info(
        "%s %s configured (environment=%s).",
        settings.project_name,
        settings.version,
        settings.environment,
    )
    return app


app = create_app()
