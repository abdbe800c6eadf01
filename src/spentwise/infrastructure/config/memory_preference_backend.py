"""In-memory preference backend — ``PreferenceBackendPort`` without any I/O.

Used for ephemeral stores (``Container(in_memory=True)``) and in tests.
"""

from __future__ import annotations

import threading
from typing import Any, Iterable, Mapping

from spentwise.domain.ports.preference_backend import PreferenceBackendPort


class InMemoryPreferenceBackend(PreferenceBackendPort):
    """Preference map held in a plain dict."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._data.get(key)

    def keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._data)

    def put_many(self, values: Mapping[str, Any]) -> None:
        with self._lock:
            self._data = {**self._data, **values}

    def remove_many(self, keys: Iterable[str]) -> None:
        doomed = set(keys)
        with self._lock:
            self._data = {k: v for k, v in self._data.items() if k not in doomed}

    def clear(self) -> None:
        with self._lock:
            self._data = {}
