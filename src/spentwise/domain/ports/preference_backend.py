"""Port (ABC) for the persistent key/value medium behind the settings store.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping


class PreferenceBackendPort(ABC):
    """Contract for a flat, string-keyed preference map.

    Values are ``str``, ``bool`` or ``int``. The mutating methods apply their
    whole argument as one unit: on failure they raise
    :class:`~spentwise.domain.errors.PreferenceStorageError` and the
    previously committed state is left untouched.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value for *key*, or ``None`` when absent."""

    @abstractmethod
    def keys(self) -> frozenset[str]:
        """Return every key currently stored."""

    @abstractmethod
    def put_many(self, values: Mapping[str, Any]) -> None:
        """Write all *values* at once."""

    @abstractmethod
    def remove_many(self, keys: Iterable[str]) -> None:
        """Remove all *keys* at once. Keys that are absent are ignored."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every key."""

    def contains(self, key: str) -> bool:
        """True if *key* is currently stored."""
        return key in self.keys()
