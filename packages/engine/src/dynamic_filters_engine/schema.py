"""
Field schema, the read-only registry of filterable fields.

The schema is built once from static configuration and then only read,
so one instance can be shared by every validator, accessor and engine
(including across threads).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from types import MappingProxyType
from typing import Any

from pydantic import Field

from .exceptions import FieldNotFoundError, SchemaConfigurationError
from .operators import FieldType, FilterOperator
from .value_object import ValueObject

ValueExtractor = Callable[[Any], Any]
"""Custom accessor: receives the record, returns the field value."""


class FieldDefinition(ValueObject):
    """
    Metadata for one filterable field.

    Attributes:
        key: Stable identifier; dots denote nesting (``address.city``).
        label: Display name only.
        type: Semantic type, selects the evaluator.
        operators: Operators allowed for this field, in display order.
            Must be a subset of ``OPERATORS_BY_TYPE[type]``.
        options: Closed value domain for select fields.
        accessor: Optional custom value extractor overriding path lookup.
    """

    key: str
    label: str
    type: FieldType
    operators: tuple[FilterOperator, ...]
    options: tuple[str, ...] | None = None
    accessor: ValueExtractor | None = Field(default=None, exclude=True, repr=False)


class FieldSchema:
    """
    Immutable mapping of field key → :class:`FieldDefinition`.

    Usage::

        schema = FieldSchema([
            FieldDefinition(key="name", label="Name", type=FieldType.TEXT,
                            operators=(FilterOperator.CONTAINS,)),
        ])
        schema.lookup("name")      # → FieldDefinition
        schema.lookup("missing")   # → None
    """

    def __init__(self, definitions: Iterable[FieldDefinition]) -> None:
        fields: dict[str, FieldDefinition] = {}
        for definition in definitions:
            if definition.key in fields:
                raise SchemaConfigurationError(
                    f"Duplicate field key '{definition.key}'"
                )
            fields[definition.key] = definition
        self._fields = MappingProxyType(fields)

    # -- look-up -------------------------------------------------------------

    def lookup(self, field_key: Any) -> FieldDefinition | None:
        """Return the definition for *field_key* or ``None``; never raises."""
        if not isinstance(field_key, str):
            return None
        return self._fields.get(field_key)

    def require(self, field_key: str) -> FieldDefinition:
        """
        Strict variant of :meth:`lookup`.

        Raises:
            FieldNotFoundError: If the key is not part of the schema.
        """
        definition = self.lookup(field_key)
        if definition is None:
            raise FieldNotFoundError(str(field_key), list(self._fields))
        return definition

    def field_keys(self) -> tuple[str, ...]:
        """Field keys in declaration order."""
        return tuple(self._fields)

    def default_operator(self, field_key: str) -> FilterOperator | None:
        """First declared operator of the field, if any."""
        definition = self.lookup(field_key)
        if definition is None or not definition.operators:
            return None
        return definition.operators[0]

    # -- container protocol --------------------------------------------------

    def __contains__(self, field_key: object) -> bool:
        return isinstance(field_key, str) and field_key in self._fields

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSchema({list(self._fields)!r})"
