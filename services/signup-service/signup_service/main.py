"""FastAPI application wiring for the signup service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .api.routes import router as v1_router
from .config import get_settings
from .factories import make_signup_controller

settings = get_settings()

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the sign up controller and its collaborators for the app lifecycle."""
    app.state.signup_controller = make_signup_controller(settings)
    yield


app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)


@app.get("/healthz", tags=["health"])
def healthz() -> dict[str, str]:
    """Return a minimal readiness indicator used by orchestration systems."""
    return {"status": "ok"}


app.include_router(v1_router)


@app.get("/metrics")
def metrics() -> Response:
    """Expose Prometheus metrics for scrapes."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
