"""Text evaluator: equals, contains, startsWith, endsWith, doesNotContain."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..evaluator import FieldEvaluator
from ..operators import FieldType, FilterOperator, coerce_operator

_PREDICATES: dict[FilterOperator, Callable[[str, str], bool]] = {
    FilterOperator.EQUALS: lambda actual, wanted: actual == wanted,
    FilterOperator.CONTAINS: lambda actual, wanted: wanted in actual,
    FilterOperator.STARTS_WITH: lambda actual, wanted: actual.startswith(wanted),
    FilterOperator.ENDS_WITH: lambda actual, wanted: actual.endswith(wanted),
    FilterOperator.DOES_NOT_CONTAIN: lambda actual, wanted: wanted not in actual,
}


class TextEvaluator(FieldEvaluator):
    """Case-insensitive string matching; an empty record value never matches."""

    @property
    def field_type(self) -> FieldType:
        return FieldType.TEXT

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if not isinstance(record_value, str) or not record_value:
            return False
        if not isinstance(filter_value, str):
            return False
        predicate = _PREDICATES.get(coerce_operator(operator))  # type: ignore[arg-type]
        if predicate is None:
            return False
        return predicate(record_value.lower(), filter_value.lower())
