from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from staffboard.api.v1.router import api_router
from staffboard.core.config import Settings, settings
from staffboard.services.notification_service import NotificationService
from staffboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def configure_logging(config: Settings) -> None:
    level = logging.DEBUG if config.DEBUG else config.LOG_LEVEL.upper()
    logging.getLogger("staffboard").setLevel(level)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    configure_logging(settings)
    store = RecordStore.from_settings(settings)
    notifications = NotificationService(max_items=settings.NOTIFICATION_FEED_SIZE)
    notifications.attach(store)
    application.state.store = store
    application.state.notifications = notifications
    logger.info("RecordStore ready (%s)", store.counts())
    yield
    notifications.close()
    await store.close()


app = FastAPI(
    title="Staffboard API",
    description="Employee, role, department and performance review management",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staffboard API"}


@app.exception_handler(ValidationError)
async def record_validation_error_handler(request: Request, exc: ValidationError):
    """A merged update that no longer forms a valid record is rejected unchanged."""
    logger.warning("Rejected change on %s: %d validation error(s)", request.url.path, exc.error_count())
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
    )
