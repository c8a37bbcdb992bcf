"""Shared fixtures for employee directory tests."""

from __future__ import annotations

import datetime

import pytest

from dynamic_filters_employees import (
    Address,
    Employee,
    FilterStateStore,
    InMemoryKeyValueStore,
)

REFERENCE_DATE = datetime.date(2025, 6, 30)


def _make_employee(employee_id: int, **overrides) -> Employee:
    data = {
        "id": employee_id,
        "name": f"Employee {employee_id}",
        "email": f"employee{employee_id}@company.com",
        "department": "Engineering",
        "role": "Senior Developer",
        "salary": 90000,
        "joinDate": datetime.date(2020, 1, 15),
        "isActive": True,
        "skills": ("Python", "AWS"),
        "address": Address(city="Boston", state="MA"),
        "projects": 3,
        "lastReview": datetime.date(2024, 6, 1),
        "performanceRating": 4.2,
    }
    data.update(overrides)
    return Employee.model_validate(data)


@pytest.fixture
def make_employee():
    """Factory for employees with sensible defaults."""
    return _make_employee


@pytest.fixture
def reference_date() -> datetime.date:
    return REFERENCE_DATE


@pytest.fixture
def employees(make_employee) -> list[Employee]:
    return [
        make_employee(1, name="John Smith", salary=120000, projects=7),
        make_employee(
            2,
            name="Jane Doe",
            department="Sales",
            role="Sales Representative",
            salary=65000,
            isActive=False,
            skills=("React",),
            address=Address(city="Austin", state="TX"),
        ),
        make_employee(
            3,
            name="Michael Brown",
            department="HR",
            role="HR Specialist",
            salary=80000,
            joinDate=datetime.date(2023, 3, 1),
            skills=("Docker", "Kubernetes", "AWS"),
            address=Address(city="Seattle", state="WA"),
            projects=0,
        ),
    ]


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def state_store(kv_store: InMemoryKeyValueStore) -> FilterStateStore:
    return FilterStateStore(kv_store)
