"""Select evaluators: single-select ``is``/``isNot``, multi-select ``in``/``notIn``."""

from __future__ import annotations

from typing import Any

from ..evaluator import FieldEvaluator
from ..operators import FieldType, FilterOperator, coerce_operator
from ..values import is_string_sequence


class SingleSelectEvaluator(FieldEvaluator):
    """
    Exact string (in)equality.

    An empty record value fails both operators: absence is never
    "not equal to" anything.
    """

    @property
    def field_type(self) -> FieldType:
        return FieldType.SINGLE_SELECT

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
        resolved = coerce_operator(operator)
        if resolved is FilterOperator.IS:
            return record_value == filter_value
        if resolved is FilterOperator.IS_NOT:
            return record_value != filter_value
        return False


class MultiSelectEvaluator(FieldEvaluator):
    """Set intersection: ``in`` needs at least one shared value, ``notIn`` none."""

    @property
    def field_type(self) -> FieldType:
        return FieldType.MULTI_SELECT

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if not is_string_sequence(record_value) or not is_string_sequence(filter_value):
            return False
        resolved = coerce_operator(operator)
        if resolved not in (FilterOperator.IN, FilterOperator.NOT_IN):
            return False
        if not all(isinstance(selected, str) for selected in filter_value):
            return False
        shared = any(selected in record_value for selected in filter_value)
        return shared if resolved is FilterOperator.IN else not shared
