"""User-facing notification models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from staffboard.models.base import CamelModel


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(CamelModel):
    id: str
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT
    created_at: datetime
