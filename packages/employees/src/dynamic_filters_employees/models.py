"""Employee record model."""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import Field

from dynamic_filters_engine import ValueObject


class Address(ValueObject):
    city: str
    state: str
    country: str = "USA"


class Employee(ValueObject):
    """
    One employee profile.

    Field aliases follow the camelCase names used by the record source
    (``joinDate``, ``isActive``, ...), which are also the filter field keys.
    """

    id: int
    name: str
    email: str
    department: str
    role: str
    salary: int | float
    join_date: datetime.date = Field(alias="joinDate")
    is_active: bool = Field(alias="isActive")
    skills: tuple[str, ...] = ()
    address: Address
    projects: int
    last_review: datetime.date = Field(alias="lastReview")
    performance_rating: float = Field(alias="performanceRating")

    def to_record(self) -> dict[str, Any]:
        """JSON-compatible dict keyed by the source's field names."""
        return self.model_dump(by_alias=True, mode="json")
