from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from staffboard.models.department import DepartmentCreate
from staffboard.models.employee import Employee, EmployeeCreate, EmployeeStatus, EmployeeUpdate
from staffboard.models.review import PerformanceReviewUpdate
from staffboard.models.role import RoleCreate, RoleUpdate


def test_employee_accepts_both_naming_styles():
    camel = EmployeeCreate(
        firstName="Ann",
        lastName="Lee",
        email="ann@x.com",
        roleId="1",
        departmentId="1",
        hireDate="2024-01-01",
        status="active",
    )
    snake = EmployeeCreate(
        first_name="Ann",
        last_name="Lee",
        email="ann@x.com",
        role_id="1",
        department_id="1",
        hire_date=date(2024, 1, 1),
        status=EmployeeStatus.ACTIVE,
    )
    assert camel == snake
    assert camel.model_dump(by_alias=True)["hireDate"] == date(2024, 1, 1)


def test_employee_requires_core_fields():
    with pytest.raises(ValidationError):
        EmployeeCreate(firstName="Ann", lastName="Lee")


def test_employee_full_name():
    employee = Employee(
        id="1",
        first_name="John",
        last_name="Doe",
        email="john.doe@company.com",
        role_id="1",
        department_id="1",
        hire_date=date(2020, 1, 15),
        status="active",
    )
    assert employee.full_name == "John Doe"
    assert employee.phone is None


def test_update_tracks_only_sent_fields():
    update = EmployeeUpdate.model_validate({"status": "terminated"})
    assert update.model_dump(exclude_unset=True) == {"status": EmployeeStatus.TERMINATED}


def test_review_update_date_field():
    update = PerformanceReviewUpdate.model_validate({"date": "2023-04-01"})
    assert update.date == date(2023, 4, 1)


def test_role_payloads_drop_blank_responsibilities():
    role = RoleCreate(title="Ops", responsibilities=["Uptime", "\t", ""], departmentId="2", level=3)
    assert role.responsibilities == ["Uptime"]
    assert RoleUpdate(responsibilities=None).responsibilities is None


def test_department_create_defaults():
    department = DepartmentCreate(name="Legal")
    assert department.created_at == date.today()
    assert department.parent_department_id is None
