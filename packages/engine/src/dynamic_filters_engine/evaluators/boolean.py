"""Boolean evaluator: ``is``."""

from __future__ import annotations

from typing import Any

from ..evaluator import FieldEvaluator
from ..operators import FieldType, FilterOperator, coerce_operator


class BooleanEvaluator(FieldEvaluator):
    @property
    def field_type(self) -> FieldType:
        return FieldType.BOOLEAN

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if coerce_operator(operator) is not FilterOperator.IS:
            return False
        if not isinstance(record_value, bool) or not isinstance(filter_value, bool):
            return False
        return record_value == filter_value
