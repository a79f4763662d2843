from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from staffboard.api.router import api_router
from staffboard.core.config import settings
from staffboard.services.employee_client import employee_client
from staffboard.services.flow_controller import flow_controller

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    flow_controller.notifications.ttl_seconds = settings.NOTIFICATION_TTL_SECONDS
    try:
        await employee_client.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeClient; continuing without employee API")
    yield
    await employee_client.close()


app = FastAPI(
    title="Staffboard",
    description="Employee directory front-end",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.include_router(api_router)
