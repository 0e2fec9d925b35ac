"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from westgate_assistant.api.middleware import RequestIDMiddleware, MetricsMiddleware
from westgate_assistant.api.v1 import chat, mortgage
from westgate_assistant.infrastructure.database.session import init_db
from westgate_assistant.infrastructure.observability.logging import setup_logging
from westgate_assistant.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="West Gate Realty Assistant",
        description="Mortgage calculator and website chat assistant service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(mortgage.router, prefix="/v1", tags=["mortgage"])
    app.include_router(chat.router, prefix="/v1", tags=["chat"])

    return app


app = create_app()
