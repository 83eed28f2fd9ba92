"""User-facing notifications raised from record store change events."""

from __future__ import annotations

import logging
import uuid
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone

from staffboard.models.department import Department
from staffboard.models.employee import Employee
from staffboard.models.notification import Notification, NotificationVariant
from staffboard.models.review import PerformanceReview
from staffboard.models.role import Role
from staffboard.services.record_store import ChangeAction, ChangeEvent, EntityKind, RecordStore

logger = logging.getLogger(__name__)

DEFAULT_FEED_SIZE = 50

_TITLE_NOUNS = {
    EntityKind.EMPLOYEE: "Employee",
    EntityKind.ROLE: "Role",
    EntityKind.DEPARTMENT: "Department",
    EntityKind.REVIEW: "Performance review",
}

_TITLE_VERBS = {
    ChangeAction.CREATED: "created",
    ChangeAction.UPDATED: "updated",
    ChangeAction.DELETED: "removed",
}


def _employee_message(action: ChangeAction, employee: Employee) -> str:
    if action == ChangeAction.CREATED:
        return f"{employee.full_name} has been added to the system."
    if action == ChangeAction.UPDATED:
        return f"{employee.full_name}'s information has been updated."
    return f"{employee.full_name} has been removed from the system."


def _named_message(action: ChangeAction, label: str) -> str:
    if action == ChangeAction.CREATED:
        return f"{label} has been added to the system."
    if action == ChangeAction.UPDATED:
        return f"{label} has been updated."
    return f"{label} has been removed from the system."


def _review_message(action: ChangeAction, employee: Employee) -> str:
    verb = {
        ChangeAction.CREATED: "recorded",
        ChangeAction.UPDATED: "updated",
        ChangeAction.DELETED: "removed",
    }[action]
    return f"Review for {employee.full_name} has been {verb}."


class NotificationService:
    """Keeps a bounded, newest-first feed of notifications for store changes.

    Review notifications name the reviewed employee and are skipped when that
    employee no longer exists.
    """

    def __init__(
        self,
        max_items: int = DEFAULT_FEED_SIZE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._feed: deque[Notification] = deque(maxlen=max_items)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._store: RecordStore | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def attach(self, store: RecordStore) -> None:
        if self._unsubscribe:
            self._unsubscribe()
        self._store = store
        self._unsubscribe = store.subscribe(self.handle_event)

    def close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
        self._unsubscribe = None
        self._store = None

    def handle_event(self, event: ChangeEvent) -> None:
        description = self._describe(event)
        if description is None:
            return

        notification = Notification(
            id=uuid.uuid4().hex,
            title=f"{_TITLE_NOUNS[event.entity]} {_TITLE_VERBS[event.action]}",
            description=description,
            variant=(
                NotificationVariant.DESTRUCTIVE
                if event.action == ChangeAction.DELETED
                else NotificationVariant.DEFAULT
            ),
            created_at=self._clock(),
        )
        self._feed.appendleft(notification)
        logger.info("Notification: %s - %s", notification.title, notification.description)

    def _describe(self, event: ChangeEvent) -> str | None:
        record = event.record
        if isinstance(record, Employee):
            return _employee_message(event.action, record)
        if isinstance(record, Role):
            return _named_message(event.action, f"{record.title} role")
        if isinstance(record, Department):
            return _named_message(event.action, f"{record.name} department")
        if isinstance(record, PerformanceReview):
            employee = self._store.employees.find(record.employee_id) if self._store else None
            if employee is None:
                logger.debug("No notification for review %s, employee %s not found", record.id, record.employee_id)
                return None
            return _review_message(event.action, employee)
        return None

    def recent(self, limit: int | None = None) -> list[Notification]:
        items = list(self._feed)
        return items[:limit] if limit is not None else items

    def clear(self) -> None:
        self._feed.clear()
