"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_tracker.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_tracker.api.v1 import calculations, scenarios, goals, savings, income
from finance_tracker.infrastructure.observability.logging import setup_logging
from finance_tracker.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Personal Finance Tracker",
        description="Income, savings and goal calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculations.router, prefix="/v1", tags=["calculations"])
    app.include_router(scenarios.router, prefix="/v1", tags=["scenarios"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(savings.router, prefix="/v1", tags=["savings"])
    app.include_router(income.router, prefix="/v1", tags=["income"])

    return app


app = create_app()
