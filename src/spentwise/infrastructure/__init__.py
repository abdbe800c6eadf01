"""Infrastructure layer — preference storage adapters."""

from spentwise.infrastructure.config.json_preference_backend import JsonPreferenceBackend
from spentwise.infrastructure.config.memory_preference_backend import (
    InMemoryPreferenceBackend,
)

__all__ = [
    "JsonPreferenceBackend",
    "InMemoryPreferenceBackend",
]
