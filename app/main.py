from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.db.init_db import init_db
from app.errors import register_error_handlers
from app.logging_config import configure_app_logging
from app.routers import employees, health
from app.settings import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        settings = get_settings()
        configure_app_logging(settings.log_level)
        logger.info("App startup beginning")

        init_db(seed=settings.seed_demo_data)
        logger.info("Database initialized (tables ensured, seed=%s)", settings.seed_demo_data)

        yield
        # Shutdown: sessions are per-request, nothing to release here.

    app = FastAPI(title="Employee Service", lifespan=lifespan)
    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(employees.router)

    return app


app = create_app()
