"""Field types and the operators each of them accepts."""

from __future__ import annotations

from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Semantic type of a filterable field."""

    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    AMOUNT = "amount"
    SINGLE_SELECT = "singleSelect"
    MULTI_SELECT = "multiSelect"
    BOOLEAN = "boolean"


class FilterOperator(str, Enum):
    """Operators a filter condition may use.

    Several types share a wire name (``equals`` is both a text and a number
    operator, ``is`` both a select and a boolean operator); the field type
    decides the meaning.
    """

    # Text / number
    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    DOES_NOT_CONTAIN = "doesNotContain"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"

    # Ranges
    BETWEEN = "between"

    # Selects / boolean
    IS = "is"
    IS_NOT = "isNot"
    IN = "in"
    NOT_IN = "notIn"


OPERATORS_BY_TYPE: dict[FieldType, tuple[FilterOperator, ...]] = {
    FieldType.TEXT: (
        FilterOperator.EQUALS,
        FilterOperator.CONTAINS,
        FilterOperator.STARTS_WITH,
        FilterOperator.ENDS_WITH,
        FilterOperator.DOES_NOT_CONTAIN,
    ),
    FieldType.NUMBER: (
        FilterOperator.EQUALS,
        FilterOperator.GREATER_THAN,
        FilterOperator.LESS_THAN,
        FilterOperator.GREATER_THAN_OR_EQUAL,
        FilterOperator.LESS_THAN_OR_EQUAL,
    ),
    FieldType.DATE: (FilterOperator.BETWEEN,),
    FieldType.AMOUNT: (FilterOperator.BETWEEN,),
    FieldType.SINGLE_SELECT: (FilterOperator.IS, FilterOperator.IS_NOT),
    FieldType.MULTI_SELECT: (FilterOperator.IN, FilterOperator.NOT_IN),
    FieldType.BOOLEAN: (FilterOperator.IS,),
}


def coerce_operator(value: Any) -> FilterOperator | None:
    """Return the :class:`FilterOperator` for *value*, or ``None`` if unknown."""
    if isinstance(value, FilterOperator):
        return value
    if not isinstance(value, str):
        return None
    try:
        return FilterOperator(value)
    except ValueError:
        return None


def coerce_field_type(value: Any) -> FieldType | None:
    """Return the :class:`FieldType` for *value*, or ``None`` if unknown."""
    if isinstance(value, FieldType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return FieldType(value)
    except ValueError:
        return None
