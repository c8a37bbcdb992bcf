"""
Built-in field evaluators.

Provides one FieldEvaluator per FieldType and a factory function to
create registries.

Usage::

    from dynamic_filters_engine.evaluators import build_default_registry

    registry = build_default_registry()
    registry.evaluate(FieldType.NUMBER, 7, "greaterThan", 5)
"""

from __future__ import annotations

from ..evaluator import EvaluatorRegistry, FieldEvaluator
from .boolean import BooleanEvaluator
from .number import NumberEvaluator
from .ranges import AmountRangeEvaluator, DateRangeEvaluator
from .select import MultiSelectEvaluator, SingleSelectEvaluator
from .text import TextEvaluator


def build_default_registry() -> EvaluatorRegistry:
    """
    Create a registry with an evaluator for every built-in FieldType.

    Returns a fresh instance each call, suitable for dependency injection.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate("text", "Engineering", "equals", "engineering")
        True
    """
    registry = EvaluatorRegistry()
    registry.register_all(
        TextEvaluator(),
        NumberEvaluator(),
        DateRangeEvaluator(),
        AmountRangeEvaluator(),
        SingleSelectEvaluator(),
        MultiSelectEvaluator(),
        BooleanEvaluator(),
    )
    return registry


__all__ = [
    "AmountRangeEvaluator",
    "BooleanEvaluator",
    "DateRangeEvaluator",
    "EvaluatorRegistry",
    "FieldEvaluator",
    "MultiSelectEvaluator",
    "NumberEvaluator",
    "SingleSelectEvaluator",
    "TextEvaluator",
    "build_default_registry",
]
