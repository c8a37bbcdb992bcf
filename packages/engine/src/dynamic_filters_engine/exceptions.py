"""
Exception hierarchy for configuration and strict look-ups.

The filtering path itself never raises: unknown fields, malformed values
and unregistered types all degrade to "does not match". These exceptions
cover programmer errors (a badly built schema) and the explicitly strict
helpers such as :meth:`FieldSchema.require`.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class DynamicFiltersError(Exception):
    """Root exception for the dynamic-filters packages."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class SchemaConfigurationError(DynamicFiltersError):
    """The field schema was built with an inconsistent configuration."""


class FieldNotFoundError(DynamicFiltersError):
    """
    Unknown field key with fuzzy-matched suggestions.

    Example error message::

        Unknown field 'departmnt'.
        Did you mean one of these?
          • department

        Available fields: department, email, name, ...
    """

    def __init__(
        self,
        field_key: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.field_key = field_key
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            field_key, available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Unknown field '{self.field_key}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.field_key,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class EvaluatorNotFoundError(DynamicFiltersError):
    """No evaluator is registered for a field type."""

    def __init__(self, field_type: str) -> None:
        self.field_type = field_type
        super().__init__(f"No evaluator registered for field type '{field_type}'")


class FilterStateError(DynamicFiltersError):
    """Persisted filter state could not be decoded."""
