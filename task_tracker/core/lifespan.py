"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, schema, DB engine).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from task_tracker.core.config import get_settings
from task_tracker.infrastructure.persistence import database
from task_tracker.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, then table creation when DATABASE_CREATE_SCHEMA is set.
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()
    setup_logging()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    if settings.database_create_schema:
        await database.create_schema()
        logger.info("Database schema created")

    yield

    await database.dispose_engine()
