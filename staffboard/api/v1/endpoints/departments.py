from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from staffboard.core.dependencies import get_store
from staffboard.models.department import Department, DepartmentCreate, DepartmentUpdate
from staffboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/departments", tags=["departments"])


def _not_found(department_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Department with id '{department_id}' not found",
    )


@router.get("", response_model=list[Department])
async def list_departments(store: RecordStore = Depends(get_store)):  # noqa: B008
    try:
        return await store.list_departments()
    except Exception as err:
        logger.exception("Failed to list departments")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve departments",
        ) from err


@router.get("/{department_id}", response_model=Department)
async def get_department(department_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    department = await store.get_department(department_id)
    if not department:
        raise _not_found(department_id)
    return department


@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(payload: DepartmentCreate, store: RecordStore = Depends(get_store)):  # noqa: B008
    return await store.create_department(payload)


@router.patch("/{department_id}", response_model=Department)
async def update_department(
    department_id: str,
    payload: DepartmentUpdate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    department = await store.update_department(department_id, payload)
    if not department:
        raise _not_found(department_id)
    return department


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(department_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    if not await store.delete_department(department_id):
        raise _not_found(department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
