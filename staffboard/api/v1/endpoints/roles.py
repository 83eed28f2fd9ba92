from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from staffboard.core.dependencies import get_store
from staffboard.models.role import Role, RoleCreate, RoleUpdate
from staffboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roles", tags=["roles"])


def _not_found(role_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Role with id '{role_id}' not found",
    )


@router.get("", response_model=list[Role])
async def list_roles(
    search: str | None = None,
    department_id: str | None = Query(None, alias="departmentId"),  # noqa: B008
    level: int | None = None,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    try:
        return await store.list_roles(search=search, department_id=department_id, level=level)
    except Exception as err:
        logger.exception("Failed to list roles")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve roles",
        ) from err


@router.get("/{role_id}", response_model=Role)
async def get_role(role_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    role = await store.get_role(role_id)
    if not role:
        raise _not_found(role_id)
    return role


@router.post("", response_model=Role, status_code=status.HTTP_201_CREATED)
async def create_role(payload: RoleCreate, store: RecordStore = Depends(get_store)):  # noqa: B008
    return await store.create_role(payload)


@router.patch("/{role_id}", response_model=Role)
async def update_role(
    role_id: str,
    payload: RoleUpdate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    role = await store.update_role(role_id, payload)
    if not role:
        raise _not_found(role_id)
    return role


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(role_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    if not await store.delete_role(role_id):
        raise _not_found(role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
