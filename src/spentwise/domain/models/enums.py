"""Enumerations for SpentWise settings."""

from enum import Enum


class SettingCategory(str, Enum):
    """Closed set of setting groups, each supporting a scoped reset."""

    ACCOUNT = "account"
    APP_PREFERENCES = "app_preferences"
    NOTIFICATIONS = "notifications"

    @property
    def label(self) -> str:
        """Human-readable name used by the CLI."""
        return _LABELS[self]


_LABELS = {
    SettingCategory.ACCOUNT: "Account",
    SettingCategory.APP_PREFERENCES: "App Preferences",
    SettingCategory.NOTIFICATIONS: "Notifications",
}
