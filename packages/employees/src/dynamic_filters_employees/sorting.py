"""
Record sorting for tabular display.

Null values always sort last. Sequences compare by length, numbers
numerically, strings case-insensitively and booleans with ``False``
first; values of different kinds are grouped by kind.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from dynamic_filters_engine import FieldValueAccessor, resolve_path

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dynamic_filters_engine import FieldSchema


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(NamedTuple):
    field: str
    direction: SortDirection


def parse_sort(raw: str | None, default_field: str = "id") -> SortSpec:
    """Parse ``"salary"`` / ``"-salary"`` into a :class:`SortSpec`."""
    if not raw or not raw.strip():
        return SortSpec(default_field, SortDirection.ASC)
    stripped = raw.strip()
    if stripped.startswith("-"):
        return SortSpec(stripped[1:], SortDirection.DESC)
    return SortSpec(stripped, SortDirection.ASC)


def toggle_sort(current: SortSpec, field: str) -> SortSpec:
    """Clicking the active column flips its direction; another column sorts ascending."""
    if current.field == field:
        flipped = (
            SortDirection.DESC
            if current.direction is SortDirection.ASC
            else SortDirection.ASC
        )
        return SortSpec(field, flipped)
    return SortSpec(field, SortDirection.ASC)


def _sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, bool):
        return (0, int(value))
    if isinstance(value, int | float):
        return (1, value)
    if isinstance(value, str):
        return (2, value.casefold())
    if isinstance(value, datetime.date):
        return (3, value.isoformat())
    if isinstance(value, list | tuple | set | frozenset):
        return (4, len(value))
    return (5, str(value).lower())


def sort_records(
    records: Iterable[Any],
    field: str,
    direction: SortDirection | str = SortDirection.ASC,
    *,
    schema: FieldSchema | None = None,
) -> list[Any]:
    """
    Return a new, stably sorted list of *records*.

    Values are read through the schema's accessors when *schema* is given,
    otherwise by dotted path.
    """
    accessor = FieldValueAccessor(schema) if schema is not None else None
    descending = SortDirection(direction) is SortDirection.DESC

    def value_of(record: Any) -> Any:
        if accessor is not None:
            return accessor.resolve(record, field)
        return resolve_path(record, field)

    keyed = [(value_of(record), record) for record in records]
    present = [(v, r) for v, r in keyed if v is not None]
    missing = [r for v, r in keyed if v is None]
    present.sort(key=lambda pair: _sort_key(pair[0]), reverse=descending)
    return [r for _, r in present] + missing
