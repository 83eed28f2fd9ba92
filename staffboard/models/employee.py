"""Employee models."""

from __future__ import annotations

from datetime import date
from enum import Enum

from staffboard.models.base import CamelModel
from staffboard.models.review import PerformanceReview


class EmployeeStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"
    TERMINATED = "terminated"


class EmployeeBase(CamelModel):
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    avatar: str | None = None
    role_id: str
    department_id: str
    hire_date: date
    status: EmployeeStatus


class EmployeeCreate(EmployeeBase):
    """Request body for adding an employee."""


class EmployeeUpdate(CamelModel):
    """Partial employee update; only fields sent by the client are merged."""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    avatar: str | None = None
    role_id: str | None = None
    department_id: str | None = None
    hire_date: date | None = None
    status: EmployeeStatus | None = None


class Employee(EmployeeBase):
    id: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class EmployeeDetail(Employee):
    """Single-employee view with the employee's reviews attached."""

    performance_reviews: list[PerformanceReview] = []
