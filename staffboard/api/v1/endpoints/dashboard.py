from __future__ import annotations

from fastapi import APIRouter, Depends

from staffboard.core.dependencies import get_store
from staffboard.models.dashboard import DashboardStats, DepartmentOverview
from staffboard.services.record_store import RecordStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(store: RecordStore = Depends(get_store)):  # noqa: B008
    return await store.get_dashboard_stats()


@router.get("/departments", response_model=list[DepartmentOverview])
async def department_overview(store: RecordStore = Depends(get_store)):  # noqa: B008
    return await store.get_department_overview()
