"""
Filter state persistence.

Filter conditions are stored as a JSON list of ``{id, field, operator,
value}`` objects under a single key of a string-keyed store. Missing or
corrupt state always loads as an empty filter list.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from dynamic_filters_engine import FilterCondition, FilterStateError

from .config import DEFAULT_STORAGE_KEY

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("dynamic_filters.employees.persistence")

_STATE_ADAPTER = TypeAdapter(list[FilterCondition])


# ── Codec ────────────────────────────────────────────────────────────


def encode_filter_state(conditions: Iterable[FilterCondition]) -> str:
    """Encode conditions as a JSON list; range values use ``from``/``to`` keys."""
    return _STATE_ADAPTER.dump_json(list(conditions), by_alias=True).decode("utf-8")


def decode_filter_state(raw: str | bytes | None, *, strict: bool = False) -> list[FilterCondition]:
    """
    Decode a JSON filter list.

    Args:
        raw: Stored text, or ``None`` when nothing was stored.
        strict: Raise instead of returning an empty list on corrupt input.

    Raises:
        FilterStateError: Only in strict mode, when *raw* cannot be decoded.
    """
    if raw is None:
        return []
    try:
        return _STATE_ADAPTER.validate_json(raw)
    except PydanticValidationError as exc:
        if strict:
            raise FilterStateError(f"Corrupt filter state: {exc}") from exc
        logger.warning("Discarding corrupt filter state (%d errors)", exc.error_count())
        return []


# ── Key-value stores ─────────────────────────────────────────────────


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable string-keyed storage, shaped like browser local storage."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed fake for unit tests."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore:
    """Stores all keys in one JSON object file.

    An unreadable or malformed file reads as empty; writes replace the
    file atomically.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    def _read(self) -> dict[str, object]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable state file %s", self._path, exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, items: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(items, handle)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


# ── Filter state store ───────────────────────────────────────────────


class FilterStateStore:
    """Loads and saves the filter list under one key of a :class:`KeyValueStore`."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[FilterCondition]:
        """Return the saved conditions; ``[]`` when missing or corrupt."""
        try:
            raw = self._store.get_item(self._key)
        except OSError:
            logger.warning("Could not read filter state %r", self._key, exc_info=True)
            return []
        return decode_filter_state(raw)

    def save(self, conditions: Iterable[FilterCondition]) -> bool:
        """Persist *conditions*; failures are logged and reported as ``False``."""
        try:
            self._store.set_item(self._key, encode_filter_state(conditions))
        except (OSError, ValueError):
            logger.error("Error saving filter state %r", self._key, exc_info=True)
            return False
        return True

    def clear(self) -> None:
        self._store.remove_item(self._key)
