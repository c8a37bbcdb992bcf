"""Immutable Value Object base class."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for Value Objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )
