"""In-memory asynchronous record store for employees, roles, departments and reviews."""

from __future__ import annotations

import logging
import secrets
import string
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

import anyio
from pydantic import BaseModel

from staffboard.core.config import Settings
from staffboard.models.dashboard import DashboardStats, DepartmentOverview
from staffboard.models.department import Department, DepartmentCreate, DepartmentUpdate
from staffboard.models.employee import (
    Employee,
    EmployeeCreate,
    EmployeeDetail,
    EmployeeStatus,
    EmployeeUpdate,
)
from staffboard.models.review import PerformanceReview, PerformanceReviewCreate, PerformanceReviewUpdate
from staffboard.models.role import Role, RoleCreate, RoleUpdate
from staffboard.services import seed_data
from staffboard.services.dashboard import (
    RECENT_REVIEW_WINDOW_DAYS,
    compute_dashboard_stats,
    compute_department_overview,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ID_LENGTH = 9
_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


class EntityKind(str, Enum):
    EMPLOYEE = "employee"
    ROLE = "role"
    DEPARTMENT = "department"
    REVIEW = "review"


class ChangeAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class ChangeEvent:
    action: ChangeAction
    entity: EntityKind
    # For deletes, the record as it was just before removal.
    record: BaseModel


ChangeListener = Callable[[ChangeEvent], None]


@dataclass(frozen=True)
class StoreDelays:
    """Simulated latency, in seconds, awaited before each kind of operation."""

    listing: float = 0.0
    lookup: float = 0.0
    write: float = 0.0
    stats: float = 0.0

    @classmethod
    def from_settings(cls, settings: Settings) -> StoreDelays:
        return cls(
            listing=settings.STORE_LIST_DELAY,
            lookup=settings.STORE_GET_DELAY,
            write=settings.STORE_WRITE_DELAY,
            stats=settings.STORE_STATS_DELAY,
        )


class Collection(Generic[ModelT]):
    """Ordered id -> record mapping. Synchronous; callers handle copying."""

    def __init__(self, kind: EntityKind, records: Iterable[ModelT] = ()) -> None:
        self.kind = kind
        self._records: dict[str, ModelT] = {}
        for record in records:
            self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def values(self) -> list[ModelT]:
        return list(self._records.values())

    def find(self, record_id: str) -> ModelT | None:
        return self._records.get(record_id)

    def insert(self, record: ModelT) -> None:
        self._records[record.id] = record

    def merge(self, record_id: str, changes: Mapping[str, Any]) -> ModelT | None:
        current = self._records.get(record_id)
        if current is None:
            return None
        model_fields = type(current).model_fields
        aliases = {info.alias: name for name, info in model_fields.items() if info.alias}
        fields: dict[str, Any] = {}
        for key, value in changes.items():
            name = aliases.get(key, key)
            if name in model_fields and name != "id":
                fields[name] = value
        # Reassigning an existing key keeps its position in the dict.
        self._records[record_id] = type(current).model_validate({**current.model_dump(), **fields})
        return self._records[record_id]

    def remove(self, record_id: str) -> ModelT | None:
        return self._records.pop(record_id, None)


def _copy(record: ModelT) -> ModelT:
    return record.model_copy(deep=True)


def _changes(changes: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(changes, BaseModel):
        return changes.model_dump(exclude_unset=True)
    return dict(changes)


class RecordStore:
    """Asynchronous CRUD over four in-memory collections.

    Every operation awaits its configured delay and then does its in-memory
    work without suspending again, so mutations from concurrent callers never
    interleave. Reads return deep copies; a missing id is reported as None
    (or False for deletes), never raised. Foreign keys are not checked.
    """

    def __init__(
        self,
        delays: StoreDelays | None = None,
        *,
        seed: bool = True,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] = generate_id,
        recent_window_days: int = RECENT_REVIEW_WINDOW_DAYS,
    ) -> None:
        self.delays = delays or StoreDelays()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._id_factory = id_factory
        self._recent_window_days = recent_window_days
        self._listeners: list[ChangeListener] = []

        self.employees: Collection[Employee] = Collection(
            EntityKind.EMPLOYEE, seed_data.seed_employees() if seed else ()
        )
        self.roles: Collection[Role] = Collection(EntityKind.ROLE, seed_data.seed_roles() if seed else ())
        self.departments: Collection[Department] = Collection(
            EntityKind.DEPARTMENT, seed_data.seed_departments() if seed else ()
        )
        self.reviews: Collection[PerformanceReview] = Collection(
            EntityKind.REVIEW, seed_data.seed_reviews() if seed else ()
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> RecordStore:
        return cls(
            StoreDelays.from_settings(settings),
            seed=settings.STORE_SEED,
            recent_window_days=settings.RECENT_REVIEW_WINDOW_DAYS,
        )

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    async def close(self) -> None:
        self._listeners.clear()

    def _publish(self, action: ChangeAction, kind: EntityKind, record: BaseModel) -> None:
        event = ChangeEvent(action=action, entity=kind, record=_copy(record))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Change listener failed for %s %s", kind.value, action.value)

    def _new_id(self, collection: Collection[Any]) -> str:
        record_id = self._id_factory()
        while record_id in collection:
            record_id = self._id_factory()
        return record_id

    # Generic operations; callers have already awaited the delay.

    def _create(
        self,
        collection: Collection[ModelT],
        model: type[ModelT],
        create_model: type[BaseModel],
        payload: BaseModel | Mapping[str, Any],
    ) -> ModelT:
        if not isinstance(payload, BaseModel):
            payload = create_model.model_validate(payload)
        data = payload.model_dump()
        data.pop("id", None)
        record = model(**data, id=self._new_id(collection))
        collection.insert(record)
        logger.info("Created %s %s", collection.kind.value, record.id)
        self._publish(ChangeAction.CREATED, collection.kind, record)
        return _copy(record)

    def _update(
        self,
        collection: Collection[ModelT],
        record_id: str,
        changes: BaseModel | Mapping[str, Any],
    ) -> ModelT | None:
        record = collection.merge(record_id, _changes(changes))
        if record is None:
            logger.debug("Update skipped, %s %s not found", collection.kind.value, record_id)
            return None
        logger.info("Updated %s %s", collection.kind.value, record_id)
        self._publish(ChangeAction.UPDATED, collection.kind, record)
        return _copy(record)

    def _delete(self, collection: Collection[Any], record_id: str) -> bool:
        record = collection.remove(record_id)
        if record is None:
            logger.debug("Delete skipped, %s %s not found", collection.kind.value, record_id)
            return False
        logger.info("Deleted %s %s", collection.kind.value, record_id)
        self._publish(ChangeAction.DELETED, collection.kind, record)
        return True

    # Employees

    async def list_employees(
        self,
        *,
        search: str | None = None,
        status: EmployeeStatus | str | None = None,
        department_id: str | None = None,
        role_id: str | None = None,
    ) -> list[Employee]:
        await anyio.sleep(self.delays.listing)
        needle = search.lower() if search else None
        results: list[Employee] = []
        for employee in self.employees.values():
            if needle and not (
                needle in employee.first_name.lower()
                or needle in employee.last_name.lower()
                or needle in employee.email.lower()
            ):
                continue
            if status is not None and employee.status != status:
                continue
            if department_id is not None and employee.department_id != department_id:
                continue
            if role_id is not None and employee.role_id != role_id:
                continue
            results.append(_copy(employee))
        return results

    async def get_employee(self, employee_id: str) -> EmployeeDetail | None:
        await anyio.sleep(self.delays.lookup)
        employee = self.employees.find(employee_id)
        if employee is None:
            return None
        reviews = [_copy(r) for r in self.reviews.values() if r.employee_id == employee_id]
        return EmployeeDetail(**employee.model_dump(), performance_reviews=reviews)

    async def create_employee(self, payload: EmployeeCreate | Mapping[str, Any]) -> Employee:
        await anyio.sleep(self.delays.write)
        return self._create(self.employees, Employee, EmployeeCreate, payload)

    async def update_employee(
        self, employee_id: str, changes: EmployeeUpdate | Mapping[str, Any]
    ) -> Employee | None:
        await anyio.sleep(self.delays.write)
        return self._update(self.employees, employee_id, changes)

    async def delete_employee(self, employee_id: str) -> bool:
        await anyio.sleep(self.delays.write)
        return self._delete(self.employees, employee_id)

    # Roles

    async def list_roles(
        self,
        *,
        search: str | None = None,
        department_id: str | None = None,
        level: int | None = None,
    ) -> list[Role]:
        await anyio.sleep(self.delays.listing)
        needle = search.lower() if search else None
        results: list[Role] = []
        for role in self.roles.values():
            if needle and not (needle in role.title.lower() or needle in role.description.lower()):
                continue
            if department_id is not None and role.department_id != department_id:
                continue
            if level is not None and role.level != level:
                continue
            results.append(_copy(role))
        return results

    async def get_role(self, role_id: str) -> Role | None:
        await anyio.sleep(self.delays.lookup)
        role = self.roles.find(role_id)
        return _copy(role) if role else None

    async def create_role(self, payload: RoleCreate | Mapping[str, Any]) -> Role:
        await anyio.sleep(self.delays.write)
        return self._create(self.roles, Role, RoleCreate, payload)

    async def update_role(self, role_id: str, changes: RoleUpdate | Mapping[str, Any]) -> Role | None:
        await anyio.sleep(self.delays.write)
        return self._update(self.roles, role_id, changes)

    async def delete_role(self, role_id: str) -> bool:
        await anyio.sleep(self.delays.write)
        return self._delete(self.roles, role_id)

    # Departments

    async def list_departments(self) -> list[Department]:
        await anyio.sleep(self.delays.listing)
        return [_copy(d) for d in self.departments.values()]

    async def get_department(self, department_id: str) -> Department | None:
        await anyio.sleep(self.delays.lookup)
        department = self.departments.find(department_id)
        return _copy(department) if department else None

    async def create_department(self, payload: DepartmentCreate | Mapping[str, Any]) -> Department:
        await anyio.sleep(self.delays.write)
        return self._create(self.departments, Department, DepartmentCreate, payload)

    async def update_department(
        self, department_id: str, changes: DepartmentUpdate | Mapping[str, Any]
    ) -> Department | None:
        await anyio.sleep(self.delays.write)
        return self._update(self.departments, department_id, changes)

    async def delete_department(self, department_id: str) -> bool:
        await anyio.sleep(self.delays.write)
        return self._delete(self.departments, department_id)

    # Performance reviews

    async def list_reviews(self, *, employee_id: str | None = None) -> list[PerformanceReview]:
        await anyio.sleep(self.delays.listing)
        return [
            _copy(r) for r in self.reviews.values() if employee_id is None or r.employee_id == employee_id
        ]

    async def get_review(self, review_id: str) -> PerformanceReview | None:
        await anyio.sleep(self.delays.lookup)
        review = self.reviews.find(review_id)
        return _copy(review) if review else None

    async def create_review(self, payload: PerformanceReviewCreate | Mapping[str, Any]) -> PerformanceReview:
        await anyio.sleep(self.delays.write)
        return self._create(self.reviews, PerformanceReview, PerformanceReviewCreate, payload)

    async def update_review(
        self, review_id: str, changes: PerformanceReviewUpdate | Mapping[str, Any]
    ) -> PerformanceReview | None:
        await anyio.sleep(self.delays.write)
        return self._update(self.reviews, review_id, changes)

    async def delete_review(self, review_id: str) -> bool:
        await anyio.sleep(self.delays.write)
        return self._delete(self.reviews, review_id)

    # Derived

    async def get_dashboard_stats(self) -> DashboardStats:
        await anyio.sleep(self.delays.stats)
        return compute_dashboard_stats(
            self.employees.values(),
            self.roles.values(),
            self.departments.values(),
            self.reviews.values(),
            now=self._clock(),
            window_days=self._recent_window_days,
        )

    async def get_department_overview(self) -> list[DepartmentOverview]:
        await anyio.sleep(self.delays.stats)
        overview = compute_department_overview(
            self.departments.values(),
            self.employees.values(),
            self.roles.values(),
        )
        return [_copy(o) for o in overview]

    def counts(self) -> dict[str, int]:
        return {
            "employees": len(self.employees),
            "roles": len(self.roles),
            "departments": len(self.departments),
            "reviews": len(self.reviews),
        }
