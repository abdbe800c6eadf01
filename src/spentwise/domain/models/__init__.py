"""Domain models — categories, category settings and the key registry."""

from spentwise.domain.models.enums import SettingCategory
from spentwise.domain.models.registry import (
    CATEGORY_MODELS,
    SETTINGS,
    SettingSpec,
    keys_for,
    parse_category,
    resettable_keys,
    spec_for,
)
from spentwise.domain.models.settings import (
    AccountSettings,
    AppPreferences,
    CategorySettings,
    NotificationSettings,
)

__all__ = [
    "AccountSettings",
    "AppPreferences",
    "CATEGORY_MODELS",
    "CategorySettings",
    "NotificationSettings",
    "SETTINGS",
    "SettingCategory",
    "SettingSpec",
    "keys_for",
    "parse_category",
    "resettable_keys",
    "spec_for",
]
