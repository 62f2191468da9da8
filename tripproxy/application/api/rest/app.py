import logging
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tripproxy.application.api.rest.errors import map_proxy_error
from tripproxy.application.api.rest.routes import health, trips
from tripproxy.application.di import create_container
from tripproxy.config import Config, configure_logging
from tripproxy.domain.shared.error import ProxyError
from tripproxy.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    yield
    # Closes the upstream connection pool
    await container.close()


def create_app(config: Config | None = None, container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application."""
    if config is None:
        # Pydantic Settings populates from env vars at runtime
        config = Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s v%s", config.server.name, config.server.version)
    logger.info("Proxying %s", config.upstream.url)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    if config.telemetry.instrument:
        # Instrument FastAPI for automatic tracing of HTTP requests
        logfire.instrument_httpx()
        logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    if container is None:
        container = create_container(config)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(trips.router)

    # Global proxy error handler - maps domain and upstream errors to HTTP responses
    @app_instance.exception_handler(ProxyError)
    async def proxy_error_handler(request: Request, exc: ProxyError):
        http_exc = map_proxy_error(exc)
        if http_exc.status_code >= 500:
            logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
