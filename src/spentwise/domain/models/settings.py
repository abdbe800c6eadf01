"""Settings models for SpentWise.

One Pydantic model per :class:`SettingCategory`. These models are the single
declarative table of settings: each field's ``alias`` is the key persisted in
the preference backend and its ``default`` is the value every reader falls
back to when that key is absent.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _CategorySettings(BaseModel):
    """Common configuration for category models."""

    model_config = ConfigDict(
        populate_by_name=True, frozen=True, strict=True, extra="ignore"
    )


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


class AccountSettings(_CategorySettings):
    """User profile and account security."""

    full_name: str = Field(default="", alias="fullName")
    date_of_birth: str = Field(default="", alias="dateOfBirth")
    username: str = Field(default="", alias="username")
    email: str = Field(default="", alias="email")
    phone: str = Field(default="", alias="phone")
    address: str = Field(default="", alias="address")
    currency: str = Field(
        default="USD ($)",
        alias="currency",
        description="Display currency, e.g. 'EUR (€)'.",
    )
    two_factor_auth: bool = Field(default=False, alias="twoFactorAuth")
    account_created: str = Field(
        default="",
        alias="accountCreated",
        description="ISO date the profile was created. Not part of the account form.",
        json_schema_extra={"user_editable": False},
    )


# ---------------------------------------------------------------------------
# App preferences
# ---------------------------------------------------------------------------


class AppPreferences(_CategorySettings):
    """Appearance, startup behaviour and budget view preferences."""

    dark_mode: bool = Field(default=False, alias="darkMode")
    font_size: str = Field(default="Medium", alias="fontSize")
    language: str = Field(default="English", alias="language")
    date_format: str = Field(default="MM/DD/YYYY", alias="dateFormat")
    time_format: str = Field(default="12-hour (AM/PM)", alias="timeFormat")
    start_on_boot: bool = Field(default=False, alias="startOnBoot")
    start_minimized: bool = Field(default=False, alias="startMinimized")
    auto_backup: bool = Field(default=True, alias="autoBackup")
    default_view: str = Field(default="Monthly", alias="defaultView")
    chart_type: str = Field(default="Pie Chart", alias="chartType")
    animations_level: int = Field(
        default=50,
        alias="animationsLevel",
        description="Animation intensity slider position (0-100).",
    )


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


class NotificationSettings(_CategorySettings):
    """Which reminders to send, how often, over which channels."""

    notify_bills: bool = Field(default=True, alias="notifyBills")
    notify_subscriptions: bool = Field(default=True, alias="notifySubscriptions")
    notify_weekly: bool = Field(default=True, alias="notifyWeekly")
    notify_overspend: bool = Field(default=True, alias="notifyOverspend")
    notify_motivation: bool = Field(default=True, alias="notifyMotivation")
    notify_frequency: str = Field(default="Weekly", alias="notifyFrequency")
    notify_time: str = Field(default="9:00 AM", alias="notifyTime")
    notify_email: bool = Field(default=True, alias="notifyEmail")
    notify_desktop: bool = Field(default=True, alias="notifyDesktop")
    notify_push: bool = Field(default=False, alias="notifyPush")
    quiet_hours: bool = Field(default=False, alias="quietHours")
    quiet_from: str = Field(default="22:00", alias="quietFrom")
    quiet_to: str = Field(default="07:00", alias="quietTo")


CategorySettings = AccountSettings | AppPreferences | NotificationSettings
