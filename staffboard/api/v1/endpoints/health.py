from __future__ import annotations

from fastapi import APIRouter, Depends

from staffboard.core.config import settings
from staffboard.core.dependencies import get_store
from staffboard.services.record_store import RecordStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(store: RecordStore = Depends(get_store)):  # noqa: B008
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "records": store.counts(),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
