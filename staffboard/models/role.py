"""Job role models."""

from __future__ import annotations

from pydantic import field_validator

from staffboard.models.base import CamelModel


def _drop_blank(responsibilities: list[str] | None) -> list[str] | None:
    if responsibilities is None:
        return None
    return [r for r in responsibilities if r.strip()]


class RoleBase(CamelModel):
    title: str
    description: str = ""
    responsibilities: list[str] = []
    department_id: str
    level: int
    is_manager: bool = False


class RoleCreate(RoleBase):
    """Request body for adding a role. Blank responsibilities are dropped."""

    @field_validator("responsibilities")
    @classmethod
    def _strip_blank_responsibilities(cls, value: list[str]) -> list[str]:
        return _drop_blank(value)


class RoleUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    responsibilities: list[str] | None = None
    department_id: str | None = None
    level: int | None = None
    is_manager: bool | None = None

    @field_validator("responsibilities")
    @classmethod
    def _strip_blank_responsibilities(cls, value: list[str] | None) -> list[str] | None:
        return _drop_blank(value)


class Role(RoleBase):
    id: str
