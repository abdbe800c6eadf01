"""Setting registry — the flat key table derived from the category models.

Every persisted key appears here exactly once, together with its category,
declared type and default. A key that is not in :data:`SETTINGS` is not a
setting.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel

from spentwise.domain.errors import ConfigurationError, UnknownSettingError
from spentwise.domain.models.enums import SettingCategory
from spentwise.domain.models.settings import (
    AccountSettings,
    AppPreferences,
    NotificationSettings,
)

CATEGORY_MODELS: Mapping[SettingCategory, type[BaseModel]] = MappingProxyType(
    {
        SettingCategory.ACCOUNT: AccountSettings,
        SettingCategory.APP_PREFERENCES: AppPreferences,
        SettingCategory.NOTIFICATIONS: NotificationSettings,
    }
)

_SUPPORTED_TYPES = (str, bool, int)


@dataclass(frozen=True)
class SettingSpec:
    """A single named, typed, defaulted setting."""

    key: str
    field_name: str
    category: SettingCategory
    value_type: type
    default: Any
    user_editable: bool = True


def _build_specs() -> dict[str, SettingSpec]:
    specs: dict[str, SettingSpec] = {}
    for category, model in CATEGORY_MODELS.items():
        for name, info in model.model_fields.items():
            key = info.alias or name
            if key in specs:
                raise ConfigurationError(
                    f"Setting key {key!r} is declared by both "
                    f"{specs[key].category.value} and {category.value}"
                )
            if info.annotation not in _SUPPORTED_TYPES:
                raise ConfigurationError(
                    f"Setting {key!r} has unsupported type {info.annotation!r}"
                )
            extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else {}
            specs[key] = SettingSpec(
                key=key,
                field_name=name,
                category=category,
                value_type=info.annotation,
                default=info.default,
                user_editable=bool(extra.get("user_editable", True)),
            )
    return specs


SETTINGS: Mapping[str, SettingSpec] = MappingProxyType(_build_specs())


def spec_for(key: str) -> SettingSpec:
    """Return the :class:`SettingSpec` for *key* or raise :class:`UnknownSettingError`."""
    try:
        return SETTINGS[key]
    except KeyError:
        raise UnknownSettingError(f"Unknown setting: {key}") from None


def specs_for(category: SettingCategory) -> tuple[SettingSpec, ...]:
    """All settings of *category*, in declaration order."""
    return tuple(s for s in SETTINGS.values() if s.category is category)


def keys_for(category: SettingCategory) -> tuple[str, ...]:
    """All persisted keys of *category*."""
    return tuple(s.key for s in specs_for(category))


def resettable_keys(category: SettingCategory) -> tuple[str, ...]:
    """Keys removed by a scoped reset of *category* (user-editable ones only)."""
    return tuple(s.key for s in specs_for(category) if s.user_editable)


def category_of(model: BaseModel) -> SettingCategory:
    """Map a category model instance back to its :class:`SettingCategory`."""
    for category, model_cls in CATEGORY_MODELS.items():
        if type(model) is model_cls:
            return category
    raise UnknownSettingError(f"Not a settings category model: {type(model).__name__}")


def parse_category(value: str | SettingCategory) -> SettingCategory:
    """Accept a category enum, its value (``app_preferences``) or a dashed form."""
    if isinstance(value, SettingCategory):
        return value
    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return SettingCategory(normalized)
    except ValueError:
        choices = ", ".join(c.value for c in SettingCategory)
        raise UnknownSettingError(
            f"Unknown settings category: {value!r} (expected one of: {choices})"
        ) from None
