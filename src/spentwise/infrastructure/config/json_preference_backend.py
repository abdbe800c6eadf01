"""JSON preference backend — implements ``PreferenceBackendPort`` on a file.

The whole map is kept as one flat JSON object (``{"darkMode": true, ...}``).
Every mutation writes a complete new file to a temp path in the same
directory and renames it over the old one, so a crash or a failed write
never leaves a half-written map behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import time
from pathlib import Path
from typing import Any, Iterable, Mapping

from spentwise.domain.errors import PreferenceStorageError
from spentwise.domain.ports.preference_backend import PreferenceBackendPort

logger = logging.getLogger(__name__)


class JsonPreferenceBackend(PreferenceBackendPort):
    """File-backed preference map.

    Parameters
    ----------
    path : Path
        Location of the JSON file. The parent directory is created on the
        first write.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._data: dict[str, Any] | None = None
        self._lock = threading.RLock()

    # -- Reads ---------------------------------------------------------------

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._view().get(key)

    def keys(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._view())

    # -- Writes --------------------------------------------------------------

    def put_many(self, values: Mapping[str, Any]) -> None:
        with self._lock:
            updated = dict(self._view())
            updated.update(values)
            self._commit(updated)

    def remove_many(self, keys: Iterable[str]) -> None:
        with self._lock:
            current = self._view()
            doomed = set(keys) & current.keys()
            if not doomed:
                return
            self._commit({k: v for k, v in current.items() if k not in doomed})

    def clear(self) -> None:
        """Delete the preferences file."""
        with self._lock:
            try:
                self._path.unlink(missing_ok=True)
            except OSError as exc:
                raise PreferenceStorageError(
                    f"Could not delete preferences file {self._path}: {exc}"
                ) from exc
            self._data = {}

    def reload(self) -> None:
        """Drop the cached map so the next access re-reads the file."""
        with self._lock:
            self._data = None

    @property
    def path(self) -> Path:
        """Absolute path to the preferences JSON file."""
        return self._path

    # -- Internals -----------------------------------------------------------

    def _view(self) -> dict[str, Any]:
        if self._data is None:
            self._data = self._read()
        return self._data

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            if not isinstance(raw, dict):
                raise ValueError("preferences root is not a JSON object")
        except (OSError, ValueError) as exc:
            logger.warning(
                "Preferences file %s is unreadable, falling back to defaults: %s",
                self._path,
                exc,
            )
            self._backup_corrupt()
            return {}

        logger.debug("Loaded %d preference(s) from %s", len(raw), self._path)
        return raw

    def _backup_corrupt(self) -> None:
        stamp = time.strftime("%Y%m%d_%H%M%S")
        backup = self._path.with_name(f"{self._path.name}.bak.{stamp}")
        try:
            backup.write_bytes(self._path.read_bytes())
        except OSError as exc:
            logger.error("Could not back up corrupt preferences file %s: %s", self._path, exc)
        else:
            logger.info("Corrupt preferences file backed up to %s", backup)

    def _commit(self, data: dict[str, Any]) -> None:
        """Persist *data* atomically (write to temp, then rename)."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
            )
            try:
                try:
                    fh = os.fdopen(tmp_fd, "w", encoding="utf-8")
                except Exception:
                    os.close(tmp_fd)
                    raise
                with fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False, sort_keys=True)
                Path(tmp_path).replace(self._path)
            except Exception:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as exc:
            raise PreferenceStorageError(
                f"Could not write preferences to {self._path}: {exc}"
            ) from exc

        self._data = data
