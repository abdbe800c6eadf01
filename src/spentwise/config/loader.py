"""Storage configuration loader.

Resolves the preferences directory and returns a validated StorageConfig.
Uses module-level caching so the location is only resolved once per process.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import platformdirs
from pydantic import ValidationError

from spentwise.config.models import StorageConfig
from spentwise.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

APP_NAME = "spentwise"
CONFIG_DIR_ENV = "SPENTWISE_CONFIG_DIR"

# Module-level cache
_config_cache: dict[str, StorageConfig] = {}


def load_storage_config(config_dir: Optional[Path] = None) -> StorageConfig:
    """Resolve where preferences are stored.

    Parameters
    ----------
    config_dir : Path | None
        Explicit directory. If ``None``, ``$SPENTWISE_CONFIG_DIR`` is used
        when set, otherwise the platform's per-user config directory.

    Returns
    -------
    StorageConfig
        Validated configuration instance.

    Raises
    ------
    ConfigurationError
        If the resolved values do not form a valid configuration.
    """
    if config_dir is None:
        env_dir = os.environ.get(CONFIG_DIR_ENV)
        if env_dir:
            config_dir = Path(env_dir).expanduser()
        else:
            config_dir = Path(platformdirs.user_config_dir(APP_NAME, appauthor=False))

    cache_key = str(Path(config_dir).resolve())
    if cache_key in _config_cache:
        return _config_cache[cache_key]

    try:
        config = StorageConfig(app_name=APP_NAME, config_dir=config_dir)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid storage configuration: {exc}") from exc

    logger.debug("Preferences will be stored at %s", config.preferences_path)
    _config_cache[cache_key] = config
    return config


def clear_cache() -> None:
    """Clear the config cache — useful for testing."""
    _config_cache.clear()
