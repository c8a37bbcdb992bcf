"""
Filter value shapes.

A condition's value is one of a closed set of shapes: a string, a number,
a boolean, a date range, an amount range, a sequence of strings, or
``None``. Which shape is expected depends on the field's type, so values
are stored verbatim on the condition and recognised here on use.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any, Union

from pydantic import ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .value_object import ValueObject


class DateRange(ValueObject):
    """Inclusive calendar-day range, serialised as ``{"from": ..., "to": ...}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    from_: str = Field(alias="from")
    to: str


class AmountRange(ValueObject):
    """Inclusive numeric range, serialised as ``{"min": ..., "max": ...}``."""

    model_config = ConfigDict(frozen=True, strict=True)

    min: int | float
    max: int | float


FilterValue = Union[
    str, int, float, bool, DateRange, AmountRange, Sequence[str], None
]


def is_number(value: Any) -> bool:
    """True for ints and floats; booleans are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    return is_number(value) and math.isfinite(value)


def is_string_sequence(value: Any) -> bool:
    """True for lists/tuples/sets of values, never for a bare string."""
    return isinstance(value, list | tuple | set | frozenset)


def as_date_range(value: Any) -> DateRange | None:
    """Recognise a :class:`DateRange` or a mapping with string ``from``/``to``."""
    if isinstance(value, DateRange):
        return value
    # only the wire key is accepted; ``from_`` is the Python attribute name
    if not isinstance(value, Mapping) or "from" not in value:
        return None
    try:
        return DateRange.model_validate(dict(value))
    except PydanticValidationError:
        return None


def as_amount_range(value: Any) -> AmountRange | None:
    """Recognise an :class:`AmountRange` or a mapping with numeric ``min``/``max``."""
    if isinstance(value, AmountRange):
        return value
    if not isinstance(value, Mapping):
        return None
    try:
        return AmountRange.model_validate(dict(value))
    except PydanticValidationError:
        return None
