"""Shared base model for the dashboard's camelCase JSON contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase, accepts both camelCase and snake_case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
