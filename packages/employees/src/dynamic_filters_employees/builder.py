"""
Filter-builder state transitions.

Each function takes the current filter state (or one condition) and
returns a new value; nothing is modified in place.

Example::

    state = add_filter((), schema=EMPLOYEE_SCHEMA)
    row = change_field(state[0], "salary", EMPLOYEE_SCHEMA)
    row = change_value(row, AmountRange(min=80000, max=120000))
    state = update_filter(state, row)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dynamic_filters_engine import (
    AmountRange,
    DateRange,
    FieldType,
    FilterCondition,
    FilterOperator,
    coerce_field_type,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dynamic_filters_engine import FieldSchema, FilterValue

FilterState = tuple[FilterCondition, ...]


def default_value_for(field_type: FieldType | str) -> FilterValue:
    """Initial value shown for a freshly selected field of *field_type*."""
    resolved = coerce_field_type(field_type)
    if resolved in (FieldType.TEXT, FieldType.SINGLE_SELECT):
        return ""
    if resolved is FieldType.NUMBER:
        return 0
    if resolved is FieldType.DATE:
        return DateRange(from_="", to="")
    if resolved is FieldType.AMOUNT:
        return AmountRange(min=0, max=0)
    if resolved is FieldType.MULTI_SELECT:
        return []
    if resolved is FieldType.BOOLEAN:
        return True
    return None


def create_empty_filter(schema: FieldSchema) -> FilterCondition:
    """A new condition on the schema's first field, with its first operator."""
    keys = schema.field_keys()
    if not keys:
        return FilterCondition(field="", operator=FilterOperator.EQUALS, value=None)
    definition = schema.require(keys[0])
    return FilterCondition(
        field=definition.key,
        operator=schema.default_operator(definition.key) or FilterOperator.EQUALS,
        value=default_value_for(definition.type),
    )


def change_field(
    condition: FilterCondition, field_key: str, schema: FieldSchema
) -> FilterCondition:
    """Switch to *field_key*, resetting operator and value; unknown keys are ignored."""
    definition = schema.lookup(field_key)
    operator = schema.default_operator(field_key)
    if definition is None or operator is None:
        return condition
    return condition.model_copy(
        update={
            "field": definition.key,
            "operator": operator.value,
            "value": default_value_for(definition.type),
        }
    )


def change_operator(
    condition: FilterCondition, operator: FilterOperator | str
) -> FilterCondition:
    wire = operator.value if isinstance(operator, FilterOperator) else operator
    return condition.model_copy(update={"operator": wire})


def change_value(condition: FilterCondition, value: Any) -> FilterCondition:
    return condition.model_copy(update={"value": value})


def add_filter(
    state: Iterable[FilterCondition],
    condition: FilterCondition | None = None,
    *,
    schema: FieldSchema,
) -> FilterState:
    """Append *condition*, or an empty filter when none is given."""
    new = condition if condition is not None else create_empty_filter(schema)
    return (*state, new)


def update_filter(
    state: Iterable[FilterCondition], updated: FilterCondition
) -> FilterState:
    """Replace the condition sharing *updated*'s id, keeping its position."""
    return tuple(updated if c.id == updated.id else c for c in state)


def remove_filter(state: Iterable[FilterCondition], condition_id: str) -> FilterState:
    return tuple(c for c in state if c.id != condition_id)


def clear_filters(state: Iterable[FilterCondition] = ()) -> FilterState:  # noqa: ARG001
    return ()
