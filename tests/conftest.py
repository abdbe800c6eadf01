"""Shared fixtures for the SpentWise test-suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from spentwise.application.settings_store import SettingsStore
from spentwise.config import clear_cache
from spentwise.infrastructure.config.json_preference_backend import JsonPreferenceBackend
from spentwise.infrastructure.config.memory_preference_backend import (
    InMemoryPreferenceBackend,
)

# Documented defaults, spelled out independently of the models.
DEFAULTS: dict[str, object] = {
    "fullName": "",
    "dateOfBirth": "",
    "username": "",
    "email": "",
    "phone": "",
    "address": "",
    "accountCreated": "",
    "currency": "USD ($)",
    "twoFactorAuth": False,
    "darkMode": False,
    "fontSize": "Medium",
    "language": "English",
    "dateFormat": "MM/DD/YYYY",
    "timeFormat": "12-hour (AM/PM)",
    "startOnBoot": False,
    "startMinimized": False,
    "autoBackup": True,
    "defaultView": "Monthly",
    "chartType": "Pie Chart",
    "animationsLevel": 50,
    "notifyBills": True,
    "notifySubscriptions": True,
    "notifyWeekly": True,
    "notifyOverspend": True,
    "notifyMotivation": True,
    "notifyFrequency": "Weekly",
    "notifyTime": "9:00 AM",
    "notifyEmail": True,
    "notifyDesktop": True,
    "notifyPush": False,
    "quietHours": False,
    "quietFrom": "22:00",
    "quietTo": "07:00",
}

ACCOUNT_KWARGS = dict(
    full_name="Alice Smith",
    date_of_birth="14 Mar 1990",
    username="alice",
    email="alice@example.com",
    phone="+1 555 0100",
    address="1 Main St",
    currency="EUR (€)",
    two_factor_enabled=True,
)

APP_KWARGS = dict(
    dark_mode=True,
    font_size="Large",
    language="German",
    date_format="YYYY-MM-DD",
    time_format="24-hour",
    start_on_boot=True,
    start_minimized=True,
    auto_backup=False,
    default_view="Yearly",
    chart_type="Bar Chart",
    animations_level=80,
)

NOTIFICATION_KWARGS = dict(
    notify_bills=False,
    notify_subscriptions=False,
    notify_weekly=False,
    notify_overspend=False,
    notify_motivation=False,
    frequency="Daily",
    notify_time="7:30 PM",
    notify_email=False,
    notify_desktop=False,
    notify_push=True,
    quiet_hours_enabled=True,
    quiet_from="23:00",
    quiet_to="06:00",
)


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Ensure a clean storage config cache for every test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture()
def memory_backend() -> InMemoryPreferenceBackend:
    return InMemoryPreferenceBackend()


@pytest.fixture()
def store(memory_backend: InMemoryPreferenceBackend) -> SettingsStore:
    """SettingsStore over an in-memory backend."""
    return SettingsStore(memory_backend)


@pytest.fixture()
def prefs_path(tmp_path: Path) -> Path:
    return tmp_path / "spentwise" / "preferences.json"


@pytest.fixture()
def json_store(prefs_path: Path) -> SettingsStore:
    """SettingsStore over a JSON file in a temp directory."""
    return SettingsStore(JsonPreferenceBackend(prefs_path))
