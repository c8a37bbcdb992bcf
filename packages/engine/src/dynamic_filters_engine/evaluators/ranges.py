"""Range evaluators: date ``between`` and amount ``between``."""

from __future__ import annotations

from typing import Any

from ..evaluator import FieldEvaluator
from ..operators import FieldType, FilterOperator, coerce_operator
from ..utils import end_of_day, parse_calendar_day, parse_timestamp, start_of_day
from ..values import as_amount_range, as_date_range, is_number


class DateRangeEvaluator(FieldEvaluator):
    """
    Inclusive calendar-day range.

    ``from`` is widened to the start of its day and ``to`` to the end of
    its day, so a record dated on either boundary day matches.
    """

    @property
    def field_type(self) -> FieldType:
        return FieldType.DATE

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if coerce_operator(operator) is not FilterOperator.BETWEEN:
            return False
        date_range = as_date_range(filter_value)
        if date_range is None:
            return False
        recorded = parse_timestamp(record_value)
        first_day = parse_calendar_day(date_range.from_)
        last_day = parse_calendar_day(date_range.to)
        if recorded is None or first_day is None or last_day is None:
            return False
        return start_of_day(first_day) <= recorded <= end_of_day(last_day)


class AmountRangeEvaluator(FieldEvaluator):
    """Inclusive ``min <= value <= max``; ordering of the bounds is not re-checked."""

    @property
    def field_type(self) -> FieldType:
        return FieldType.AMOUNT

    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        if coerce_operator(operator) is not FilterOperator.BETWEEN:
            return False
        if not is_number(record_value):
            return False
        amount_range = as_amount_range(filter_value)
        if amount_range is None:
            return False
        return bool(amount_range.min <= record_value <= amount_range.max)
