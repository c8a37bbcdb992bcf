"""Field-typed filter evaluation: schema, validation and AND-combined filtering."""

from .accessor import FieldValueAccessor, resolve_path
from .api import filter_records, validate_filter_condition
from .condition import FilterCondition, as_condition
from .engine import FilterEngine
from .evaluator import EvaluatorRegistry, FieldEvaluator
from .evaluators import build_default_registry
from .exceptions import (
    DynamicFiltersError,
    EvaluatorNotFoundError,
    FieldNotFoundError,
    FilterStateError,
    SchemaConfigurationError,
)
from .operators import (
    OPERATORS_BY_TYPE,
    FieldType,
    FilterOperator,
    coerce_field_type,
    coerce_operator,
)
from .schema import FieldDefinition, FieldSchema, ValueExtractor
from .validation import ConditionValidator, ValidationResult
from .value_object import ValueObject
from .values import AmountRange, DateRange, FilterValue, as_amount_range, as_date_range

__all__ = [
    # Core types
    "FieldType",
    "FilterOperator",
    "OPERATORS_BY_TYPE",
    "FieldDefinition",
    "FieldSchema",
    "ValueExtractor",
    "FilterCondition",
    "FilterValue",
    "DateRange",
    "AmountRange",
    "ValueObject",
    # Components
    "FieldValueAccessor",
    "ConditionValidator",
    "ValidationResult",
    "FilterEngine",
    # Evaluator / strategy
    "FieldEvaluator",
    "EvaluatorRegistry",
    "build_default_registry",
    # Entry points
    "filter_records",
    "validate_filter_condition",
    # Exceptions
    "DynamicFiltersError",
    "SchemaConfigurationError",
    "FieldNotFoundError",
    "EvaluatorNotFoundError",
    "FilterStateError",
    # Utilities
    "as_amount_range",
    "as_condition",
    "as_date_range",
    "coerce_field_type",
    "coerce_operator",
    "resolve_path",
]
