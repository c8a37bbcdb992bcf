"""
Employee field schema.

The schema is built once at import time and shared read-only by every
validator, engine and sorter in the process.
"""

from __future__ import annotations

from typing import Any

from dynamic_filters_engine import (
    FieldDefinition,
    FieldSchema,
    FieldType,
    FilterOperator,
    resolve_path,
)

DEPARTMENTS = (
    "Engineering",
    "Marketing",
    "Sales",
    "HR",
    "Finance",
    "Operations",
    "Product",
    "Design",
)

ROLES = (
    "Senior Developer",
    "Junior Developer",
    "Product Manager",
    "Designer",
    "Marketing Manager",
    "Sales Representative",
    "HR Specialist",
    "Finance Analyst",
    "Operations Manager",
    "QA Engineer",
)

CITIES = (
    "San Francisco",
    "New York",
    "Los Angeles",
    "Chicago",
    "Seattle",
    "Austin",
    "Boston",
    "Denver",
)

STATES = ("CA", "NY", "TX", "WA", "IL", "MA", "CO", "FL")

SKILLS = (
    "React",
    "TypeScript",
    "Node.js",
    "GraphQL",
    "Python",
    "Java",
    "AWS",
    "Docker",
    "Kubernetes",
    "MongoDB",
    "PostgreSQL",
    "Redis",
    "Vue.js",
    "Angular",
    "Next.js",
)

_TEXT_OPERATORS = (
    FilterOperator.EQUALS,
    FilterOperator.CONTAINS,
    FilterOperator.STARTS_WITH,
    FilterOperator.ENDS_WITH,
    FilterOperator.DOES_NOT_CONTAIN,
)
_NUMBER_OPERATORS = (
    FilterOperator.EQUALS,
    FilterOperator.GREATER_THAN,
    FilterOperator.LESS_THAN,
    FilterOperator.GREATER_THAN_OR_EQUAL,
    FilterOperator.LESS_THAN_OR_EQUAL,
)
_SELECT_OPERATORS = (FilterOperator.IS, FilterOperator.IS_NOT)


def _address_member(name: str):
    def accessor(record: Any) -> Any:
        return resolve_path(record, f"address.{name}")

    return accessor


def build_employee_schema() -> FieldSchema:
    """Create the field schema for employee records."""
    return FieldSchema(
        [
            FieldDefinition(
                key="name", label="Name", type=FieldType.TEXT, operators=_TEXT_OPERATORS
            ),
            FieldDefinition(
                key="email", label="Email", type=FieldType.TEXT, operators=_TEXT_OPERATORS
            ),
            FieldDefinition(
                key="department",
                label="Department",
                type=FieldType.SINGLE_SELECT,
                operators=_SELECT_OPERATORS,
                options=DEPARTMENTS,
            ),
            FieldDefinition(
                key="role",
                label="Role",
                type=FieldType.SINGLE_SELECT,
                operators=_SELECT_OPERATORS,
                options=ROLES,
            ),
            FieldDefinition(
                key="projects",
                label="Projects",
                type=FieldType.NUMBER,
                operators=_NUMBER_OPERATORS,
            ),
            FieldDefinition(
                key="performanceRating",
                label="Performance Rating",
                type=FieldType.NUMBER,
                operators=_NUMBER_OPERATORS,
            ),
            FieldDefinition(
                key="salary",
                label="Salary",
                type=FieldType.AMOUNT,
                operators=(FilterOperator.BETWEEN,),
            ),
            FieldDefinition(
                key="joinDate",
                label="Join Date",
                type=FieldType.DATE,
                operators=(FilterOperator.BETWEEN,),
            ),
            FieldDefinition(
                key="lastReview",
                label="Last Review",
                type=FieldType.DATE,
                operators=(FilterOperator.BETWEEN,),
            ),
            FieldDefinition(
                key="isActive",
                label="Active Status",
                type=FieldType.BOOLEAN,
                operators=(FilterOperator.IS,),
            ),
            FieldDefinition(
                key="skills",
                label="Skills",
                type=FieldType.MULTI_SELECT,
                operators=(FilterOperator.IN, FilterOperator.NOT_IN),
                options=SKILLS,
            ),
            FieldDefinition(
                key="address.city",
                label="City",
                type=FieldType.SINGLE_SELECT,
                operators=_SELECT_OPERATORS,
                options=CITIES,
                accessor=_address_member("city"),
            ),
            FieldDefinition(
                key="address.state",
                label="State",
                type=FieldType.SINGLE_SELECT,
                operators=_SELECT_OPERATORS,
                options=STATES,
                accessor=_address_member("state"),
            ),
        ]
    )


EMPLOYEE_SCHEMA = build_employee_schema()
