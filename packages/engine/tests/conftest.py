"""Shared fixtures for engine tests."""

from __future__ import annotations

from typing import Any

import pytest

from dynamic_filters_engine import (
    OPERATORS_BY_TYPE,
    FieldDefinition,
    FieldSchema,
    FieldType,
    FilterEngine,
    FilterOperator,
)
from dynamic_filters_engine.evaluators import build_default_registry


def _city(record: Any) -> Any:
    address = record.get("address") if isinstance(record, dict) else None
    return address.get("city") if isinstance(address, dict) else None


@pytest.fixture
def registry():
    """Default evaluator registry."""
    return build_default_registry()


@pytest.fixture
def schema() -> FieldSchema:
    """A small schema covering every field type."""
    return FieldSchema(
        [
            FieldDefinition(
                key="name",
                label="Name",
                type=FieldType.TEXT,
                operators=OPERATORS_BY_TYPE[FieldType.TEXT],
            ),
            FieldDefinition(
                key="projects",
                label="Projects",
                type=FieldType.NUMBER,
                operators=OPERATORS_BY_TYPE[FieldType.NUMBER],
            ),
            FieldDefinition(
                key="joinDate",
                label="Join Date",
                type=FieldType.DATE,
                operators=(FilterOperator.BETWEEN,),
            ),
            FieldDefinition(
                key="salary",
                label="Salary",
                type=FieldType.AMOUNT,
                operators=(FilterOperator.BETWEEN,),
            ),
            FieldDefinition(
                key="department",
                label="Department",
                type=FieldType.SINGLE_SELECT,
                operators=(FilterOperator.IS, FilterOperator.IS_NOT),
                options=("Engineering", "Sales", "HR"),
            ),
            FieldDefinition(
                key="skills",
                label="Skills",
                type=FieldType.MULTI_SELECT,
                operators=(FilterOperator.IN, FilterOperator.NOT_IN),
                options=("React", "Go", "Rust", "Java"),
            ),
            FieldDefinition(
                key="isActive",
                label="Active",
                type=FieldType.BOOLEAN,
                operators=(FilterOperator.IS,),
            ),
            FieldDefinition(
                key="address.state",
                label="State",
                type=FieldType.SINGLE_SELECT,
                operators=(FilterOperator.IS, FilterOperator.IS_NOT),
            ),
            FieldDefinition(
                key="address.city",
                label="City",
                type=FieldType.SINGLE_SELECT,
                operators=(FilterOperator.IS,),
                accessor=_city,
            ),
        ]
    )


@pytest.fixture
def engine(schema: FieldSchema) -> FilterEngine:
    return FilterEngine(schema)


@pytest.fixture
def records() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "name": "Ada Lovelace",
            "projects": 7,
            "joinDate": "2024-03-15",
            "salary": 90000,
            "department": "Engineering",
            "skills": ["React", "Go"],
            "isActive": True,
            "address": {"city": "Boston", "state": "MA"},
        },
        {
            "id": 2,
            "name": "Grace Hopper",
            "projects": 2,
            "joinDate": "2019-07-01",
            "salary": 60000,
            "department": "Sales",
            "skills": ["Java"],
            "isActive": False,
            "address": {"city": "Denver", "state": "CO"},
        },
        {
            "id": 3,
            "name": "",
            "projects": None,
            "joinDate": None,
            "salary": 120000,
            "department": "",
            "skills": [],
            "isActive": True,
            "address": None,
        },
    ]
