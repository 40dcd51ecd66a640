"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from visa_fee_gateway.api.dependencies import get_schedule_client, get_schedule_store
from visa_fee_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from visa_fee_gateway.api.v1 import calculate, reference, visas
from visa_fee_gateway.domain.exceptions import ScheduleSourceError
from visa_fee_gateway.infrastructure.observability.logging import setup_logging
from visa_fee_gateway.infrastructure.observability.metrics import schedule_refresh_failures_counter
from visa_fee_gateway.infrastructure.schedule_store import ScheduleStore
from visa_fee_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Optionally warm the schedule snapshot; the service still starts if the store is down"""
    if settings.load_schedule_on_startup:
        try:
            await get_schedule_store().refresh(get_schedule_client())
        except ScheduleSourceError as e:
            schedule_refresh_failures_counter.inc()
            logging.error(f"Initial schedule load failed: {e}")
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Visa Fee Gateway",
        description="Visa application charge calculation service",
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
    def health_check(store: ScheduleStore = Depends(get_schedule_store)):
        return {
            "status": "ok",
            "service": settings.service_name,
            "schedule_loaded": store.is_loaded,
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(calculate.router, prefix="/v1", tags=["fees"])
    app.include_router(visas.router, prefix="/v1", tags=["visas"])
    app.include_router(reference.router, prefix="/v1", tags=["reference"])

    return app


app = create_app()
