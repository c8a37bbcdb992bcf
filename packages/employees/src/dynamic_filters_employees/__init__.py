"""Employee directory: sample domain, persistence and filter-builder state."""

from __future__ import annotations

from .builder import (
    FilterState,
    add_filter,
    change_field,
    change_operator,
    change_value,
    clear_filters,
    create_empty_filter,
    default_value_for,
    remove_filter,
    update_filter,
)
from .config import DEFAULT_STORAGE_KEY, DirectoryConfig
from .directory import EmployeeDirectory
from .fields import EMPLOYEE_SCHEMA, build_employee_schema
from .models import Address, Employee
from .persistence import (
    FilterStateStore,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    decode_filter_state,
    encode_filter_state,
)
from .sample_data import generate_sample_data
from .sorting import SortDirection, SortSpec, parse_sort, sort_records, toggle_sort
from .source import InMemoryEmployeeSource

__all__ = [
    # Domain
    "Address",
    "Employee",
    "EMPLOYEE_SCHEMA",
    "build_employee_schema",
    "generate_sample_data",
    "InMemoryEmployeeSource",
    # Configuration
    "DEFAULT_STORAGE_KEY",
    "DirectoryConfig",
    # Persistence
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "FilterStateStore",
    "encode_filter_state",
    "decode_filter_state",
    # Builder
    "FilterState",
    "default_value_for",
    "create_empty_filter",
    "change_field",
    "change_operator",
    "change_value",
    "add_filter",
    "update_filter",
    "remove_filter",
    "clear_filters",
    # Sorting
    "SortDirection",
    "SortSpec",
    "parse_sort",
    "sort_records",
    "toggle_sort",
    # Service
    "EmployeeDirectory",
]
