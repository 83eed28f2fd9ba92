from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from staffboard.core.dependencies import get_notifications
from staffboard.models.notification import Notification
from staffboard.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(
    limit: int | None = Query(None, ge=1),  # noqa: B008
    notifications: NotificationService = Depends(get_notifications),  # noqa: B008
):
    return notifications.recent(limit)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notifications(
    notifications: NotificationService = Depends(get_notifications),  # noqa: B008
):
    notifications.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
