"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- The error boundary and its exception handlers
- Correlation id middleware
- Rate limiting
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from exception_boundary.core.config import Settings, settings
from exception_boundary.interfaces.dependencies import (
    build_error_boundary,
    get_error_boundary,
)
from exception_boundary.interfaces.health import router as health_router
from exception_boundary.interfaces.user.router import router as user_router
from exception_boundary.interfaces.video.router import router as video_router
from exception_boundary.shared.errors.handlers import register_error_handlers
from exception_boundary.shared.logging import configure_logging
from exception_boundary.shared.middleware import CorrelationIdMiddleware
from exception_boundary.shared.security.rate_limiting import limiter


def create_app(config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        config: Settings override. The shared boundary is used when omitted.

    Returns:
        A fully configured FastAPI application instance.
    """
    config = config or settings
    configure_logging(level=config.log_level)

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
    )

    # --- Error Boundary ---
    app.state.error_boundary = (
        get_error_boundary() if config is settings else build_error_boundary(config)
    )
    register_error_handlers(app)

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Middleware ---
    app.add_middleware(CorrelationIdMiddleware)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(user_router, prefix="/api/v1")
    app.include_router(video_router, prefix="/api/v1")

    return app


app = create_app()
