"""The two entry points used by owning applications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .engine import FilterEngine
from .validation import ConditionValidator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .evaluator import EvaluatorRegistry
    from .schema import FieldSchema


def validate_filter_condition(condition: Any, *, schema: FieldSchema) -> bool:
    """True if *condition* may take part in filtering against *schema*."""
    return ConditionValidator(schema).is_valid(condition)


def filter_records(
    records: Iterable[Any],
    conditions: Iterable[Any],
    *,
    schema: FieldSchema,
    registry: EvaluatorRegistry | None = None,
) -> list[Any]:
    """Return the records satisfying every condition (AND), in input order."""
    return FilterEngine(schema, registry=registry).apply(records, conditions)
