"""
Field value resolution.

A field's value is read with its custom accessor when the schema supplies
one; otherwise the dotted key is walked segment by segment over mappings,
pydantic models (by field name or alias) and plain objects.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from .schema import FieldSchema

logger = logging.getLogger("dynamic_filters.accessor")


def resolve_path(obj: Any, path: str) -> Any:
    """
    Resolve a dot-separated path on *obj*.

    Returns ``None`` as soon as any segment is missing or ``None``.
    """
    for part in path.split("."):
        if obj is None:
            return None
        obj = _read_member(obj, part)
    return obj


def _read_member(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    if isinstance(obj, BaseModel):
        return _read_model_member(obj, name)
    return getattr(obj, name, None)


def _read_model_member(model: BaseModel, name: str) -> Any:
    fields = type(model).model_fields
    if name in fields:
        return getattr(model, name)
    for field_name, info in fields.items():
        if info.alias == name:
            return getattr(model, field_name)
    return getattr(model, name, None)


class FieldValueAccessor:
    """Reads field values from records according to a :class:`FieldSchema`."""

    def __init__(self, schema: FieldSchema) -> None:
        self._schema = schema

    def resolve(self, record: Any, field_key: str) -> Any:
        """
        Return the value of *field_key* on *record*, or ``None``.

        A custom accessor's result is returned verbatim. An accessor that
        raises is logged and treated as a missing value.
        """
        definition = self._schema.lookup(field_key)
        if definition is not None and definition.accessor is not None:
            try:
                return definition.accessor(record)
            except Exception:  # noqa: BLE001
                logger.warning(
                    "Accessor for field %r failed; treating value as missing",
                    field_key,
                    exc_info=True,
                )
                return None
        if not isinstance(field_key, str):
            return None
        return resolve_path(record, field_key)
