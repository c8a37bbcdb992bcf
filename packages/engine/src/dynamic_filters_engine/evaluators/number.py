"""Number evaluator: equals, greaterThan, lessThan, greaterThanOrEqual, lessThanOrEqual."""

from __future__ import annotations

import operator as op
from collections.abc import Callable
from typing import Any

from ..evaluator import FieldEvaluator
from ..operators import FieldType, FilterOperator, coerce_operator
from ..values import is_number

_COMPARATORS: dict[FilterOperator, Callable[[Any, Any], bool]] = {
    FilterOperator.EQUALS: op.eq,
    FilterOperator.GREATER_THAN: op.gt,
    FilterOperator.LESS_THAN: op.lt,
    FilterOperator.GREATER_THAN_OR_EQUAL: op.ge,
    FilterOperator.LESS_THAN_OR_EQUAL: op.le,
}


class NumberEvaluator(FieldEvaluator):
    """Plain numeric comparison, no tolerance."""

    @property
    def field_type(self) -> FieldType:
        return FieldType.NUMBER

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if not is_number(record_value) or not is_number(filter_value):
            return False
        comparator = _COMPARATORS.get(coerce_operator(operator))  # type: ignore[arg-type]
        if comparator is None:
            return False
        return bool(comparator(record_value, filter_value))
