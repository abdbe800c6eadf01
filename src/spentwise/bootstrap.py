"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. Consumers receive the ``SettingsStore``
instance from here instead of reaching for a global preferences handle.
"""

from __future__ import annotations

from pathlib import Path

from spentwise.application.settings_store import SettingsStore
from spentwise.config import StorageConfig, load_storage_config
from spentwise.domain.ports.preference_backend import PreferenceBackendPort
from spentwise.infrastructure.config.json_preference_backend import JsonPreferenceBackend
from spentwise.infrastructure.config.memory_preference_backend import (
    InMemoryPreferenceBackend,
)


class Container:
    """Simple dependency injection container.

    Owns the preference backend and the single ``SettingsStore`` built on it.

    Usage::

        container = Container()
        store = container.settings_store
        store.save_app_preferences(dark_mode=True, ...)
    """

    def __init__(self, config_dir: Path | None = None, in_memory: bool = False) -> None:
        self._config: StorageConfig = load_storage_config(config_dir)

        self._backend: PreferenceBackendPort
        if in_memory:
            self._backend = InMemoryPreferenceBackend()
        else:
            self._backend = JsonPreferenceBackend(self._config.preferences_path)

        self._settings_store = SettingsStore(self._backend)

    @property
    def config(self) -> StorageConfig:
        """Resolved storage configuration."""
        return self._config

    @property
    def settings_store(self) -> SettingsStore:
        """The process-wide settings store."""
        return self._settings_store
