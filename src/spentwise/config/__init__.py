"""SpentWise storage configuration package."""

from spentwise.config.loader import clear_cache, load_storage_config
from spentwise.config.models import StorageConfig

__all__ = ["StorageConfig", "clear_cache", "load_storage_config"]
