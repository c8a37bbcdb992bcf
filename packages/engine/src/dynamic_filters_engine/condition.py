"""FilterCondition: one (field, operator, value) rule."""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .value_object import ValueObject


def _new_condition_id() -> str:
    return str(uuid.uuid4())


class FilterCondition(ValueObject):
    """
    A single filter rule.

    ``field`` need not exist in the schema and ``value`` is kept exactly as
    given; both are checked by the validator, not by the model, so that
    stale or hand-edited persisted state can still be loaded.
    """

    id: str = Field(default_factory=_new_condition_id)
    field: str
    operator: str
    value: Any = None

    @field_validator("operator", mode="before")
    @classmethod
    def _operator_wire_name(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value


def as_condition(candidate: Any) -> FilterCondition | None:
    """Accept a :class:`FilterCondition` or a plain mapping; ``None`` otherwise."""
    if isinstance(candidate, FilterCondition):
        return candidate
    if not isinstance(candidate, Mapping):
        return None
    try:
        return FilterCondition.model_validate(dict(candidate))
    except PydanticValidationError:
        return None
