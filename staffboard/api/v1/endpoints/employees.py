from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from staffboard.core.dependencies import get_store
from staffboard.models.employee import Employee, EmployeeCreate, EmployeeDetail, EmployeeStatus, EmployeeUpdate
from staffboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _not_found(employee_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee with id '{employee_id}' not found",
    )


@router.get("", response_model=list[Employee])
async def list_employees(
    search: str | None = None,
    status_filter: EmployeeStatus | None = Query(None, alias="status"),  # noqa: B008
    department_id: str | None = Query(None, alias="departmentId"),  # noqa: B008
    role_id: str | None = Query(None, alias="roleId"),  # noqa: B008
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    try:
        return await store.list_employees(
            search=search,
            status=status_filter,
            department_id=department_id,
            role_id=role_id,
        )
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err


@router.get("/{employee_id}", response_model=EmployeeDetail)
async def get_employee(
    employee_id: str,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    employee = await store.get_employee(employee_id)
    if not employee:
        raise _not_found(employee_id)
    return employee


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    return await store.create_employee(payload)


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    employee = await store.update_employee(employee_id, payload)
    if not employee:
        raise _not_found(employee_id)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    if not await store.delete_employee(employee_id):
        raise _not_found(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
