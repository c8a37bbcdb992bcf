"""
Per-type evaluation strategy.

Provides the FieldEvaluator interface and a registry that maps
FieldType → evaluator. Every evaluator fails closed: an unknown operator,
an unexpected value shape or a missing record value yields ``False``,
never an exception.

New field types are added by subclassing FieldEvaluator and registering
via ``register()``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import EvaluatorNotFoundError
from .operators import OPERATORS_BY_TYPE, FieldType, FilterOperator, coerce_field_type

logger = logging.getLogger("dynamic_filters.evaluator")


class FieldEvaluator(ABC):
    """
    Strategy interface for one field type.

    Each evaluator handles every operator legal for its type.
    """

    @property
    @abstractmethod
    def field_type(self) -> FieldType:
        """The field type this strategy handles."""
        ...

    @property
    def operators(self) -> tuple[FilterOperator, ...]:
        return OPERATORS_BY_TYPE[self.field_type]

    @abstractmethod
    def evaluate(
        self,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        """
        Decide whether *record_value* satisfies the condition.

        Args:
            record_value: The value resolved from the record.
            operator: The condition operator.
            filter_value: The value stored on the condition.

        Returns:
            True if the condition is satisfied; False otherwise, including
            for any input the evaluator does not understand.
        """
        ...


class EvaluatorRegistry:
    """
    Registry of FieldEvaluator instances keyed by FieldType.

    Usage::

        registry = EvaluatorRegistry()
        registry.register(TextEvaluator())

        registry.evaluate(FieldType.TEXT, "Engineering", "contains", "gine")
    """

    def __init__(self) -> None:
        self._evaluators: dict[FieldType, FieldEvaluator] = {}

    # -- registration --------------------------------------------------------

    def register(self, evaluator: FieldEvaluator) -> None:
        """Register an evaluator instance, replacing any previous one."""
        self._evaluators[evaluator.field_type] = evaluator

    def register_all(self, *evaluators: FieldEvaluator) -> None:
        for evaluator in evaluators:
            self.register(evaluator)

    def unregister(self, field_type: FieldType) -> None:
        self._evaluators.pop(field_type, None)

    # -- look-up -------------------------------------------------------------

    def get(self, field_type: FieldType | str) -> FieldEvaluator | None:
        """Return the registered evaluator or ``None``."""
        resolved = coerce_field_type(field_type)
        if resolved is None:
            return None
        return self._evaluators.get(resolved)

    def require(self, field_type: FieldType | str) -> FieldEvaluator:
        """
        Strict variant of :meth:`get`.

        Raises:
            EvaluatorNotFoundError: If no evaluator handles *field_type*.
        """
        evaluator = self.get(field_type)
        if evaluator is None:
            raise EvaluatorNotFoundError(str(field_type))
        return evaluator

    def has(self, field_type: FieldType | str) -> bool:
        return self.get(field_type) is not None

    @property
    def supported_types(self) -> set[FieldType]:
        return set(self._evaluators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        field_type: FieldType | str,
        record_value: Any,
        operator: FilterOperator | str,
        filter_value: Any,
    ) -> bool:
        """Look up the evaluator and evaluate; unregistered types never match."""
        evaluator = self.get(field_type)
        if evaluator is None:
            logger.warning("No evaluator registered for field type %r", field_type)
            return False
        return evaluator.evaluate(record_value, operator, filter_value)
