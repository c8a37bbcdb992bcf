"""
Employee directory service: record source, persisted filters and filtering.

Filters are validated on every read, so a stale or hand-edited condition
simply drops out instead of blanking the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dynamic_filters_engine import ConditionValidator, FilterEngine

from .config import DirectoryConfig
from .fields import EMPLOYEE_SCHEMA
from .persistence import FilterStateStore, InMemoryKeyValueStore, JsonFileKeyValueStore
from .sample_data import generate_sample_data
from .sorting import SortDirection, sort_records
from .source import InMemoryEmployeeSource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dynamic_filters_engine import FieldSchema, FilterCondition

    from .models import Employee
    from .persistence import KeyValueStore

logger = logging.getLogger("dynamic_filters.employees.directory")


class EmployeeDirectory:
    """Filterable, sortable view over an employee record source."""

    def __init__(
        self,
        source: InMemoryEmployeeSource,
        state_store: FilterStateStore,
        *,
        schema: FieldSchema = EMPLOYEE_SCHEMA,
        engine: FilterEngine | None = None,
    ) -> None:
        self._source = source
        self._state_store = state_store
        self._schema = schema
        self._engine = engine if engine is not None else FilterEngine(schema)
        self._validator = ConditionValidator(schema)
        self._employees: list[Employee] = []
        self._filters: tuple[FilterCondition, ...] = tuple(state_store.load())

    @classmethod
    def from_config(
        cls,
        config: DirectoryConfig | None = None,
        *,
        store: KeyValueStore | None = None,
    ) -> EmployeeDirectory:
        """Build a directory over generated sample data."""
        config = config or DirectoryConfig()
        if store is None:
            store = (
                JsonFileKeyValueStore(config.state_path)
                if config.state_path
                else InMemoryKeyValueStore()
            )
        source = InMemoryEmployeeSource(
            generate_sample_data(config.sample_size, seed=config.seed),
            latency_seconds=config.latency_seconds,
        )
        return cls(source, FilterStateStore(store, config.storage_key))

    # -- records -------------------------------------------------------------

    async def load(self) -> list[Employee]:
        """Fetch all records from the source."""
        self._employees = await self._source.get_employees()
        logger.info("Loaded %d employees", len(self._employees))
        return list(self._employees)

    @property
    def employees(self) -> list[Employee]:
        return list(self._employees)

    # -- filters -------------------------------------------------------------

    @property
    def schema(self) -> FieldSchema:
        return self._schema

    @property
    def filters(self) -> tuple[FilterCondition, ...]:
        """All conditions as edited, including incomplete ones."""
        return self._filters

    def set_filters(self, conditions: Iterable[FilterCondition]) -> None:
        """Replace the filter state and persist it."""
        self._filters = tuple(conditions)
        self._state_store.save(self._filters)

    def active_filters(self) -> list[FilterCondition]:
        """The conditions that pass validation, in order."""
        return self._validator.valid_only(self._filters)

    # -- views ---------------------------------------------------------------

    def visible_records(
        self,
        sort_field: str = "id",
        direction: SortDirection | str = SortDirection.ASC,
    ) -> list[Employee]:
        """Validated filters applied to the loaded records, then sorted."""
        filtered = self._engine.apply(self._employees, self.active_filters())
        return sort_records(filtered, sort_field, direction, schema=self._schema)

    def summary(self) -> tuple[int, int]:
        """``(shown, total)`` record counts."""
        return len(self._engine.apply(self._employees, self.active_filters())), len(
            self._employees
        )
