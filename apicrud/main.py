"""apicrud API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ApiCrudError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner shutdown
    - Error handlers extracted to api/error_handlers.py (keeps import fan-out low)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apicrud.api.error_handlers import register_error_handlers
from apicrud.api.routes import health, users
from apicrud.config import get_settings
from apicrud.infrastructure.observability import setup_logging
from apicrud.infrastructure.request_context import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("apicrud API started")
    yield
    logger.info("apicrud API shutting down")


app = FastAPI(
    title="apicrud API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

# CORS from settings
settings = get_settings()
app.add_middleware(RequestContextMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
