from __future__ import annotations

from fastapi import Request

from staffboard.services.notification_service import NotificationService
from staffboard.services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_notifications(request: Request) -> NotificationService:
    return request.app.state.notifications
