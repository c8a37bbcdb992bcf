"""
FilterEngine: AND-combined evaluation of filter conditions over records.

The engine is stateless between calls and only reads the schema and the
registry it is given, so a single instance may be shared across threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .accessor import FieldValueAccessor
from .condition import FilterCondition, as_condition
from .evaluators import build_default_registry
from .operators import FieldType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .evaluator import EvaluatorRegistry
    from .schema import FieldSchema

logger = logging.getLogger("dynamic_filters.engine")

# Relative cost of one evaluation; cheap conditions run first.
_EVALUATION_COST: dict[FieldType, int] = {
    FieldType.BOOLEAN: 0,
    FieldType.NUMBER: 1,
    FieldType.AMOUNT: 1,
    FieldType.SINGLE_SELECT: 1,
    FieldType.TEXT: 2,
    FieldType.MULTI_SELECT: 3,
    FieldType.DATE: 4,
}


class FilterEngine:
    """
    Filters records by a list of conditions.

    A record is kept iff it satisfies every condition. A condition on an
    unknown field, on a missing record value, or with a value of the wrong
    shape never matches; the engine does not raise for malformed filter
    state.

    Usage::

        engine = FilterEngine(schema)
        visible = engine.apply(records, conditions)
    """

    def __init__(
        self,
        schema: FieldSchema,
        *,
        registry: EvaluatorRegistry | None = None,
        accessor: FieldValueAccessor | None = None,
    ) -> None:
        self._schema = schema
        self._registry = registry if registry is not None else build_default_registry()
        self._accessor = accessor if accessor is not None else FieldValueAccessor(schema)

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    def matches(self, record: Any, condition: FilterCondition) -> bool:
        """Evaluate one condition against one record."""
        definition = self._schema.lookup(condition.field)
        if definition is None:
            return False
        record_value = self._accessor.resolve(record, condition.field)
        if record_value is None:
            return False
        return self._registry.evaluate(
            definition.type, record_value, condition.operator, condition.value
        )

    def apply(self, records: Iterable[Any], conditions: Iterable[Any]) -> list[Any]:
        """
        Return the records satisfying all *conditions*, in input order.

        The result is always a new list; the source collection is never
        modified.
        """
        candidates = list(records)
        raw_conditions = list(conditions)
        if not raw_conditions:
            return candidates

        parsed: list[FilterCondition] = []
        for raw in raw_conditions:
            condition = as_condition(raw)
            if condition is None:
                logger.warning("Malformed filter condition %r rejects every record", raw)
                return []
            parsed.append(condition)

        for condition in parsed:
            if self._schema.lookup(condition.field) is None:
                logger.warning(
                    "Filter on unknown field %r rejects every record", condition.field
                )

        ordered = sorted(parsed, key=self._cost)
        result = [
            record
            for record in candidates
            if all(self.matches(record, condition) for condition in ordered)
        ]
        logger.debug(
            "Filtered %d records by %d conditions: %d kept",
            len(candidates),
            len(ordered),
            len(result),
        )
        return result

    def _cost(self, condition: FilterCondition) -> int:
        definition = self._schema.lookup(condition.field)
        if definition is None:
            return -1
        return _EVALUATION_COST.get(definition.type, len(_EVALUATION_COST))
