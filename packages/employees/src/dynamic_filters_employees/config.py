"""Directory configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_STORAGE_KEY = "dynamic-filters"


@dataclass(frozen=True)
class DirectoryConfig:
    """Employee directory configuration.

    Attributes:
        storage_key: Key under which the filter state is persisted.
        state_path: JSON file backing the key-value store; in-memory if None.
        sample_size: Number of generated employees.
        seed: Seed for the sample generator; random if None.
        latency_seconds: Simulated record-source latency.
    """

    storage_key: str = DEFAULT_STORAGE_KEY
    state_path: str | None = None
    sample_size: int = 50
    seed: int | None = None
    latency_seconds: float = 0.0
