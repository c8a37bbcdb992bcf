"""
Condition validation.

A condition is valid when its field is known, its operator is one the
field explicitly declares, and its value has the shape the field's type
requires. Invalid conditions are dropped by callers before filtering.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .condition import as_condition
from .operators import FieldType, coerce_operator
from .values import (
    as_amount_range,
    as_date_range,
    is_finite_number,
    is_string_sequence,
)

if TYPE_CHECKING:
    from .schema import FieldSchema

logger = logging.getLogger("dynamic_filters.validation")


def default_errors_factory() -> dict[str, list[str]]:
    return {}


@dataclass
class ValidationResult:
    """Collects validation errors keyed by ``field``, ``operator`` or ``value``.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"value": ["must be a boolean"]})
    """

    errors: dict[str, list[str]] = field(default_factory=default_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    def __bool__(self) -> bool:
        return self.is_valid


# ── Value shape checks ───────────────────────────────────────────────


def _non_blank_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _date_range(value: Any) -> bool:
    return as_date_range(value) is not None


def _ordered_amount_range(value: Any) -> bool:
    amount_range = as_amount_range(value)
    return amount_range is not None and amount_range.min <= amount_range.max


def _non_empty_sequence(value: Any) -> bool:
    return (
        is_string_sequence(value)
        and len(value) > 0
        and all(isinstance(item, str) for item in value)
    )


def _boolean(value: Any) -> bool:
    return isinstance(value, bool)


_VALUE_CHECKS: dict[FieldType, tuple[Callable[[Any], bool], str]] = {
    FieldType.TEXT: (_non_blank_string, "must be a non-empty string"),
    FieldType.SINGLE_SELECT: (_non_blank_string, "must be a non-empty string"),
    FieldType.NUMBER: (is_finite_number, "must be a finite number"),
    FieldType.DATE: (_date_range, "must be an object with string 'from' and 'to'"),
    FieldType.AMOUNT: (
        _ordered_amount_range,
        "must be an object with numeric 'min' <= 'max'",
    ),
    FieldType.MULTI_SELECT: (_non_empty_sequence, "must be a non-empty list of strings"),
    FieldType.BOOLEAN: (_boolean, "must be a boolean"),
}


class ConditionValidator:
    """Checks conditions against a :class:`FieldSchema`; never raises."""

    def __init__(self, schema: FieldSchema) -> None:
        self._schema = schema

    def validate(self, condition: Any) -> ValidationResult:
        """Return a :class:`ValidationResult` describing the first failing check."""
        parsed = as_condition(condition)
        if parsed is None:
            return ValidationResult.failure(
                {"__root__": ["condition must have 'field', 'operator' and 'value'"]}
            )

        definition = self._schema.lookup(parsed.field)
        if definition is None:
            return ValidationResult.failure(
                {"field": [f"unknown field '{parsed.field}'"]}
            )

        operator = coerce_operator(parsed.operator)
        if operator is None or operator not in definition.operators:
            return ValidationResult.failure(
                {
                    "operator": [
                        f"operator '{parsed.operator}' is not allowed "
                        f"for field '{definition.key}'"
                    ]
                }
            )

        check, message = _VALUE_CHECKS[definition.type]
        if not check(parsed.value):
            return ValidationResult.failure({"value": [message]})
        return ValidationResult.success()

    def is_valid(self, condition: Any) -> bool:
        result = self.validate(condition)
        if not result.is_valid:
            logger.debug("Dropping invalid filter condition: %s", result.errors)
        return result.is_valid

    def valid_only(self, conditions: Any) -> list[Any]:
        """Keep the conditions that pass validation, in their original order."""
        return [c for c in conditions if self.is_valid(c)]
