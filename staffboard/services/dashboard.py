from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from staffboard.models.dashboard import DashboardStats, DepartmentOverview
from staffboard.models.department import Department
from staffboard.models.employee import Employee, EmployeeStatus
from staffboard.models.review import PerformanceReview
from staffboard.models.role import Role

RECENT_REVIEW_WINDOW_DAYS = 30


def compute_dashboard_stats(
    employees: Sequence[Employee],
    roles: Sequence[Role],
    departments: Sequence[Department],
    reviews: Sequence[PerformanceReview],
    *,
    now: datetime,
    window_days: int = RECENT_REVIEW_WINDOW_DAYS,
) -> DashboardStats:
    """Aggregate the headline numbers shown on the dashboard.

    A review counts as recent when its calendar date falls after the day
    ``window_days`` before ``now``. ``avg_performance`` is None when there
    are no reviews to average.
    """
    cutoff = (now - timedelta(days=window_days)).date()
    ratings = [r.rating for r in reviews]

    return DashboardStats(
        total_employees=len(employees),
        active_employees=sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE),
        departments_count=len(departments),
        roles_count=len(roles),
        recent_reviews=sum(1 for r in reviews if r.date > cutoff),
        avg_performance=sum(ratings) / len(ratings) if ratings else None,
    )


def compute_department_overview(
    departments: Sequence[Department],
    employees: Sequence[Employee],
    roles: Sequence[Role],
) -> list[DepartmentOverview]:
    manager_role_ids = {r.id for r in roles if r.is_manager}

    overview: list[DepartmentOverview] = []
    for department in departments:
        members = [e for e in employees if e.department_id == department.id]
        manager = next((e for e in members if e.role_id in manager_role_ids), None)
        overview.append(
            DepartmentOverview(
                department=department,
                employee_count=len(members),
                manager=manager,
            )
        )
    return overview
