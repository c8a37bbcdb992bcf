"""Async record source backed by an in-memory list."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import Employee

logger = logging.getLogger("dynamic_filters.employees.source")


class InMemoryEmployeeSource:
    """Serves employees from memory, optionally after a simulated delay.

    Callers always receive a fresh list, so they cannot reorder or shrink
    the source's own collection.
    """

    def __init__(
        self,
        employees: Iterable[Employee] = (),
        *,
        latency_seconds: float = 0.0,
    ) -> None:
        self._employees: list[Employee] = list(employees)
        self._latency = latency_seconds

    async def get_employees(self) -> list[Employee]:
        await self._simulate_latency()
        logger.debug("Serving %d employees", len(self._employees))
        return list(self._employees)

    async def get_employee_by_id(self, employee_id: int) -> Employee | None:
        await self._simulate_latency()
        return next((e for e in self._employees if e.id == employee_id), None)

    async def _simulate_latency(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)
