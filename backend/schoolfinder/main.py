"""School Finder API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SchoolFinderError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Connection pool created on startup, held on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Pool on app.state instead of a module global: routes reach it through get_db,
      tests swap it without patching modules
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schoolfinder.api.error_handlers import register_error_handlers
from schoolfinder.infrastructure.database import DatabaseSessionManager
from schoolfinder.infrastructure.observability import setup_logging
from schoolfinder.config import get_settings
from schoolfinder.api.routes import health, schools

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info("School Finder API started")
    yield
    logger.info("School Finder API shutting down")
    await db_manager.close()
    app.state.db_manager = None


app = FastAPI(
    title="School Management API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(schools.router)

register_error_handlers(app)
