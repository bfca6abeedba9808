"""
FastAPI application entry point.

Run with: uvicorn wifi_score.main:app --reload
"""

from contextlib import asynccontextmanager
import uuid

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from wifi_score import __version__
from wifi_score.api.dependencies import get_link_scoring_runtime
from wifi_score.api.exception_handlers import setup_exception_handlers
from wifi_score.api.routes import health, link
from wifi_score.core.config import settings
from wifi_score.core.logging import bind_context, clear_context, configure_logging, get_logger

# Configure logging before anything else
configure_logging()
log = get_logger(__name__)


# =============================================================================
# Correlation ID Middleware
# =============================================================================


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique correlation ID to each request.

    - Generates a UUID4 request_id for each incoming request
    - Binds it to structlog context for all logs in that request
    - Adds X-Request-ID header to responses
    """

    async def dispatch(self, request: Request, call_next):
        """Process request and add correlation ID."""
        request_id = str(uuid.uuid4())

        # Every log line of this request, reporter events included, carries it
        bind_context(request_id=request_id)

        try:
            response = await call_next(request)
            # Lets an operator match a dump or poll reply to its log lines
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            # Contextvars would otherwise leak into the next request on this task
            clear_context()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Build the scoring runtime eagerly so config errors surface at startup
    runtime = get_link_scoring_runtime()
    log.info(
        "application_starting",
        debug=settings.debug,
        max_score=runtime.score_report.max_score,
        history_capacity=runtime.score_report.history.capacity,
        poll_interval_ms=settings.poll_interval_ms,
    )

    yield

    log.info("application_shutting_down")


app = FastAPI(
    title="Wifi Score Report",
    description="Periodic link-quality scoring and reporting for a connected wifi session",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_middleware(CorrelationIDMiddleware)

setup_exception_handlers(app)

app.include_router(health.router, tags=["system"])
app.include_router(link.router)


@app.get("/")
async def root():
    """Root endpoint with basic service info."""
    return {
        "name": "Wifi Score Report",
        "version": __version__,
        "status": "running",
    }
