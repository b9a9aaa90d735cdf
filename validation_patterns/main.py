"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, filter group, pipeline behavior group)
- Error handling (global exception handler as an ASGI boundary)
- Cross-cutting middleware (correlation id, security headers, rate limiting),
  all pure ASGI
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIASGIMiddleware

from validation_patterns.core.config import settings
from validation_patterns.interfaces.dependencies import (
    get_exception_handler,
    get_validator_registry,
)
from validation_patterns.interfaces.health import router as health_router
from validation_patterns.interfaces.posts.filter_router import router as filter_router
from validation_patterns.interfaces.posts.pipeline_router import (
    router as pipeline_router,
)
from validation_patterns.shared.errors.handlers import register_error_handlers
from validation_patterns.shared.errors.middleware import ExceptionHandlerMiddleware
from validation_patterns.shared.logging import configure_logging
from validation_patterns.shared.security.headers import SecurityHeadersMiddleware
from validation_patterns.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
)
from validation_patterns.shared.tracing import CorrelationIdMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: log startup configuration."""
    logger.info(
        "%s %s starting (environment=%s, validators=%d)",
        settings.project_name,
        settings.version,
        settings.environment,
        len(get_validator_registry()),
    )
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Error Handling (innermost, so outer middleware decorates error responses) ---
    exception_handler = get_exception_handler()
    register_error_handlers(app, exception_handler)
    app.add_middleware(ExceptionHandlerMiddleware, handler=exception_handler)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIASGIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Correlation Id (outermost) ---
    app.add_middleware(CorrelationIdMiddleware)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(filter_router)
    app.include_router(pipeline_router)

    return app


app = create_app()
