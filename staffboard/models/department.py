"""Department models."""

from __future__ import annotations

from datetime import date

from pydantic import Field

from staffboard.models.base import CamelModel


class DepartmentBase(CamelModel):
    name: str
    description: str = ""
    manager_id: str | None = None
    # Reserved for a department hierarchy; stored but never traversed.
    parent_department_id: str | None = None
    created_at: date


class DepartmentCreate(DepartmentBase):
    created_at: date = Field(default_factory=date.today)


class DepartmentUpdate(CamelModel):
    name: str | None = None
    description: str | None = None
    manager_id: str | None = None
    parent_department_id: str | None = None
    created_at: date | None = None


class Department(DepartmentBase):
    id: str
