"""Taskboard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskboardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Startup initializes the database, then the owner; the IdentityGate built
      from the stored owner lives on app.state for the life of the process

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Tables created on startup: the schema is fixed, no migrations to run
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.api.error_handlers import register_error_handlers
from taskboard.api.routes import health, members, owner, tasks
from taskboard.config import get_settings
from taskboard.infrastructure.database import init_db
from taskboard.infrastructure.observability import setup_logging
from taskboard.services.board_owner import initialize_owner

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    await manager.create_tables()
    async with manager.session() as db:
        app.state.identity_gate = await initialize_owner(
            db, settings.admin_identity,
        )
    logger.info("Taskboard API started")
    yield
    logger.info("Taskboard API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Taskboard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(owner.router)
app.include_router(members.router)
app.include_router(tasks.router)

register_error_handlers(app)
