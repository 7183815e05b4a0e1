"""
Key-value record store.

One ordered map per namespace, keyed by identifier string. Values are
JSON-compatible dicts; iteration follows first-insertion order and replacing a
key keeps its position.
"""

import copy
from typing import Any, Protocol

Record = dict[str, Any]


class KeyValueStore(Protocol):
    """Protocol for the per-namespace ordered map store."""

    def get(self, namespace: str, key: str) -> Record | None:
        """Return the record stored under key, or None."""
        ...

    def values(self, namespace: str) -> list[Record]:
        """Return all records of a namespace in insertion order."""
        ...

    def insert(self, namespace: str, key: str, value: Record) -> None:
        """Insert or replace the record under key."""
        ...


class InMemoryKeyValueStore:
    """Process-local store backed by dicts."""

    def __init__(self) -> None:
        self._namespaces: dict[str, dict[str, Record]] = {}

    def _namespace(self, namespace: str) -> dict[str, Record]:
        return self._namespaces.setdefault(namespace, {})

    def get(self, namespace: str, key: str) -> Record | None:
        value = self._namespace(namespace).get(key)
        return copy.deepcopy(value) if value is not None else None

    def values(self, namespace: str) -> list[Record]:
        return [copy.deepcopy(v) for v in self._namespace(namespace).values()]

    def insert(self, namespace: str, key: str, value: Record) -> None:
        self._namespace(namespace)[key] = copy.deepcopy(value)

    def __repr__(self) -> str:
        sizes = {name: len(records) for name, records in self._namespaces.items()}
        return f"<InMemoryKeyValueStore({sizes})>"
