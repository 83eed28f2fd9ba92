"""Derived dashboard aggregates. Computed on demand, never stored."""

from __future__ import annotations

from staffboard.models.base import CamelModel
from staffboard.models.department import Department
from staffboard.models.employee import Employee


class DashboardStats(CamelModel):
    total_employees: int
    active_employees: int
    departments_count: int
    roles_count: int
    recent_reviews: int
    # None when no reviews exist
    avg_performance: float | None = None


class DepartmentOverview(CamelModel):
    department: Department
    employee_count: int
    manager: Employee | None = None
