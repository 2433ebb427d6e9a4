"""Main FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import REGISTRY, CollectorRegistry

from teams_api.api import api_router
from teams_api.api.error_handlers import register_error_handlers
from teams_api.api.middleware import MetricsMiddleware
from teams_api.core.config import settings
from teams_api.core.metrics import create_request_counter, render_metrics
from teams_api.core.observability import setup_logging
from teams_api.database import dispose_db, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("Starting Teams API...")

    # A store that cannot be reached is fatal
    init_db()

    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    dispose_db()


def create_app(registry: CollectorRegistry | None = None, use_lifespan: bool = True) -> FastAPI:
    """
    Build the application.

    Args:
        registry: Prometheus registry receiving the request counter; a
            fresh registry owned by this app when None
        use_lifespan: Connect to the database on startup
    """
    registry = registry if registry is not None else CollectorRegistry()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        lifespan=lifespan if use_lifespan else None,
    )
    app.state.metrics_registry = registry

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware, counter=create_request_counter(registry))

    register_error_handlers(app)

    app.include_router(api_router)

    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        """Root endpoint - service banner."""
        return {
            "message": "Welcome to Teams API",
            "status": "running",
            "version": settings.VERSION,
        }

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Expose Prometheus metrics."""
        payload, content_type = render_metrics(app.state.metrics_registry)
        return Response(content=payload, media_type=content_type)

    return app


# The served app exports through the process-wide registry
app = create_app(registry=REGISTRY)


def run() -> None:
    """Run the API with uvicorn."""
    uvicorn.run("teams_api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
