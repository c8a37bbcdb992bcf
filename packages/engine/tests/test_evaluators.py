"""Tests for the per-type field evaluators."""

from __future__ import annotations

import datetime

import pytest

from dynamic_filters_engine import (
    AmountRange,
    DateRange,
    EvaluatorNotFoundError,
    EvaluatorRegistry,
    FieldType,
    FilterOperator,
)
from dynamic_filters_engine.evaluators import (
    AmountRangeEvaluator,
    BooleanEvaluator,
    DateRangeEvaluator,
    MultiSelectEvaluator,
    NumberEvaluator,
    SingleSelectEvaluator,
    TextEvaluator,
    build_default_registry,
)

# ══════════════════════════════════════════════════════════════════════
# Text
# ══════════════════════════════════════════════════════════════════════


class TestTextEvaluator:
    def test_equals_is_case_insensitive(self) -> None:
        op = TextEvaluator()
        assert op.evaluate("Engineering", FilterOperator.EQUALS, "engineering") is True
        assert op.evaluate("Engineering", "equals", "Engineer") is False

    def test_contains_is_case_insensitive(self) -> None:
        op = TextEvaluator()
        assert op.evaluate("Engineering", FilterOperator.CONTAINS, "GINE") is True
        assert op.evaluate("Engineering", FilterOperator.CONTAINS, "sales") is False

    def test_prefix_and_suffix(self) -> None:
        op = TextEvaluator()
        assert op.evaluate("ada@company.com", "startsWith", "ADA") is True
        assert op.evaluate("ada@company.com", "endsWith", ".COM") is True
        assert op.evaluate("ada@company.com", "endsWith", ".io") is False

    def test_does_not_contain(self) -> None:
        op = TextEvaluator()
        assert op.evaluate("Grace Hopper", "doesNotContain", "ada") is True
        assert op.evaluate("Grace Hopper", "doesNotContain", "HOP") is False

    @pytest.mark.parametrize(
        "operator",
        ["equals", "contains", "startsWith", "endsWith", "doesNotContain"],
    )
    def test_empty_record_value_never_matches(self, operator: str) -> None:
        assert TextEvaluator().evaluate("", operator, "x") is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = TextEvaluator()
        assert op.evaluate("abc", "greaterThan", "a") is False
        assert op.evaluate("abc", "equals", 3) is False
        assert op.evaluate(123, "equals", "123") is False


# ══════════════════════════════════════════════════════════════════════
# Number
# ══════════════════════════════════════════════════════════════════════


class TestNumberEvaluator:
    def test_comparisons(self) -> None:
        op = NumberEvaluator()
        assert op.evaluate(5, "equals", 5) is True
        assert op.evaluate(5, "equals", 5.0) is True
        assert op.evaluate(6, "greaterThan", 5) is True
        assert op.evaluate(5, "greaterThan", 5) is False
        assert op.evaluate(4, "lessThan", 5) is True
        assert op.evaluate(5, "greaterThanOrEqual", 5) is True
        assert op.evaluate(5, "lessThanOrEqual", 5) is True
        assert op.evaluate(6, "lessThanOrEqual", 5) is False

    def test_no_tolerance(self) -> None:
        assert NumberEvaluator().evaluate(0.1 + 0.2, "equals", 0.3) is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = NumberEvaluator()
        assert op.evaluate(5, "between", 5) is False
        assert op.evaluate(5, "equals", "5") is False
        assert op.evaluate("5", "equals", 5) is False
        assert op.evaluate(True, "equals", 1) is False


# ══════════════════════════════════════════════════════════════════════
# Ranges
# ══════════════════════════════════════════════════════════════════════


class TestDateRangeEvaluator:
    def test_same_day_range_is_inclusive(self) -> None:
        op = DateRangeEvaluator()
        value = {"from": "2024-03-15", "to": "2024-03-15"}
        assert op.evaluate("2024-03-15", "between", value) is True

    def test_boundaries_cover_whole_days(self) -> None:
        op = DateRangeEvaluator()
        value = DateRange(from_="2024-03-15", to="2024-03-16")
        assert op.evaluate("2024-03-15T00:00:00", "between", value) is True
        assert op.evaluate("2024-03-16T23:59:59.999", "between", value) is True
        assert op.evaluate("2024-03-17T00:00:00", "between", value) is False
        assert op.evaluate("2024-03-14T23:59:59", "between", value) is False

    def test_accepts_date_objects(self) -> None:
        op = DateRangeEvaluator()
        value = {"from": "2024-01-01", "to": "2024-12-31"}
        assert op.evaluate(datetime.date(2024, 6, 1), "between", value) is True
        assert op.evaluate(datetime.datetime(2025, 1, 1), "between", value) is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = DateRangeEvaluator()
        value = {"from": "2024-01-01", "to": "2024-12-31"}
        assert op.evaluate("", "between", value) is False
        assert op.evaluate("not a date", "between", value) is False
        assert op.evaluate("2024-06-01", "equals", value) is False
        assert op.evaluate("2024-06-01", "between", {"from": "", "to": ""}) is False
        assert op.evaluate("2024-06-01", "between", {"min": 1, "max": 2}) is False
        assert op.evaluate("2024-06-01", "between", "2024-06-01") is False
        python_name = {"from_": "2024-06-01", "to": "2024-06-01"}
        assert op.evaluate("2024-06-01", "between", python_name) is False

    def test_out_of_range_offsets_never_match(self) -> None:
        op = DateRangeEvaluator()
        wide = {"from": "0001-01-01T00:00:00+05:00", "to": "2030-01-01"}
        assert op.evaluate("2024-03-15", "between", wide) is False
        assert op.evaluate(
            "9999-12-31T23:00:00-05:00", "between", {"from": "2024-01-01", "to": "9999-12-31"}
        ) is False
        aware = datetime.datetime(1, 1, 1, tzinfo=datetime.timezone(datetime.timedelta(hours=5)))
        assert op.evaluate(aware, "between", {"from": "0001-01-01", "to": "2030-01-01"}) is False


class TestAmountRangeEvaluator:
    def test_inclusive_bounds(self) -> None:
        op = AmountRangeEvaluator()
        exact = {"min": 100000, "max": 100000}
        assert op.evaluate(100000, "between", exact) is True
        assert op.evaluate(100001, "between", exact) is False
        assert op.evaluate(99999, "between", exact) is False

    def test_accepts_model_value(self) -> None:
        op = AmountRangeEvaluator()
        assert op.evaluate(90000, "between", AmountRange(min=80000, max=120000)) is True

    def test_does_not_reorder_bounds(self) -> None:
        assert AmountRangeEvaluator().evaluate(5, "between", {"min": 10, "max": 0}) is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = AmountRangeEvaluator()
        assert op.evaluate(5, "equals", {"min": 0, "max": 10}) is False
        assert op.evaluate("5", "between", {"min": 0, "max": 10}) is False
        assert op.evaluate(5, "between", {"min": "0", "max": 10}) is False
        assert op.evaluate(5, "between", {"from": "a", "to": "b"}) is False
        assert op.evaluate(5, "between", [0, 10]) is False


# ══════════════════════════════════════════════════════════════════════
# Selects and boolean
# ══════════════════════════════════════════════════════════════════════


class TestSingleSelectEvaluator:
    def test_is_and_is_not(self) -> None:
        op = SingleSelectEvaluator()
        assert op.evaluate("Engineering", "is", "Engineering") is True
        assert op.evaluate("Engineering", "is", "engineering") is False
        assert op.evaluate("Sales", "isNot", "Engineering") is True
        assert op.evaluate("Sales", "isNot", "Sales") is False

    def test_empty_value_fails_both_operators(self) -> None:
        op = SingleSelectEvaluator()
        assert op.evaluate("", "is", "Sales") is False
        assert op.evaluate("", "isNot", "Sales") is False

    def test_unknown_operator(self) -> None:
        assert SingleSelectEvaluator().evaluate("Sales", "in", "Sales") is False


class TestMultiSelectEvaluator:
    def test_membership(self) -> None:
        op = MultiSelectEvaluator()
        skills = ["React", "Go"]
        assert op.evaluate(skills, "in", ["Go", "Rust"]) is True
        assert op.evaluate(skills, "notIn", ["Rust", "Java"]) is True
        assert op.evaluate(skills, "notIn", ["Go"]) is False
        assert op.evaluate(skills, "in", ["Java"]) is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = MultiSelectEvaluator()
        assert op.evaluate("React", "in", ["React"]) is False
        assert op.evaluate(["React"], "in", "React") is False
        assert op.evaluate(["React"], "is", ["React"]) is False

    def test_set_record_values(self) -> None:
        op = MultiSelectEvaluator()
        skills = {"React", "Go"}
        assert op.evaluate(skills, "in", ["Go"]) is True
        assert op.evaluate(frozenset(skills), "notIn", ["Rust"]) is True

    def test_non_string_selections_never_match(self) -> None:
        op = MultiSelectEvaluator()
        assert op.evaluate({"React", "Go"}, "in", [["Go"]]) is False
        assert op.evaluate({"React", "Go"}, "notIn", [["Go"]]) is False
        assert op.evaluate(["React", "Go"], "in", ["Go", 1]) is False


class TestBooleanEvaluator:
    def test_exact_equality(self) -> None:
        op = BooleanEvaluator()
        assert op.evaluate(True, "is", True) is True
        assert op.evaluate(False, "is", False) is True
        assert op.evaluate(True, "is", False) is False

    def test_fails_closed_on_bad_input(self) -> None:
        op = BooleanEvaluator()
        assert op.evaluate(1, "is", True) is False
        assert op.evaluate(True, "is", "true") is False
        assert op.evaluate(True, "equals", True) is False


# ══════════════════════════════════════════════════════════════════════
# Registry
# ══════════════════════════════════════════════════════════════════════


class TestEvaluatorRegistry:
    def test_default_registry_covers_every_field_type(
        self, registry: EvaluatorRegistry
    ) -> None:
        assert registry.supported_types == set(FieldType)

    def test_evaluators_report_their_type_operators(
        self, registry: EvaluatorRegistry
    ) -> None:
        assert registry.require("amount").operators == (FilterOperator.BETWEEN,)
        assert FilterOperator.NOT_IN in registry.require(FieldType.MULTI_SELECT).operators

    def test_evaluate_dispatches_by_type(self, registry: EvaluatorRegistry) -> None:
        assert registry.evaluate("text", "Engineering", "equals", "engineering") is True
        assert registry.evaluate(FieldType.NUMBER, 7, "greaterThan", 5) is True

    def test_unregistered_type_never_matches(self) -> None:
        registry = build_default_registry()
        registry.unregister(FieldType.BOOLEAN)
        assert registry.has(FieldType.BOOLEAN) is False
        assert registry.evaluate(FieldType.BOOLEAN, True, "is", True) is False
        assert registry.evaluate("unknown", True, "is", True) is False
        with pytest.raises(EvaluatorNotFoundError):
            registry.require(FieldType.BOOLEAN)
