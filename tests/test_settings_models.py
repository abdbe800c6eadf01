"""Tests for the settings models and the key registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import DEFAULTS
from spentwise.domain.errors import UnknownSettingError
from spentwise.domain.models import (
    CATEGORY_MODELS,
    SETTINGS,
    AccountSettings,
    AppPreferences,
    NotificationSettings,
    SettingCategory,
    keys_for,
    parse_category,
    resettable_keys,
    spec_for,
)
from spentwise.domain.models.registry import category_of
from spentwise.domain.rules import constants


class TestCategoryModels:
    """Tests for the per-category Pydantic models."""

    def test_account_defaults(self) -> None:
        account = AccountSettings()
        assert account.full_name == ""
        assert account.currency == "USD ($)"
        assert account.two_factor_auth is False
        assert account.account_created == ""

    def test_app_preference_defaults(self) -> None:
        prefs = AppPreferences()
        assert prefs.font_size == "Medium"
        assert prefs.time_format == "12-hour (AM/PM)"
        assert prefs.auto_backup is True
        assert prefs.animations_level == 50

    def test_notification_defaults(self) -> None:
        notif = NotificationSettings()
        assert notif.notify_push is False
        assert notif.notify_frequency == "Weekly"
        assert notif.quiet_from == "22:00"
        assert notif.quiet_to == "07:00"

    def test_populate_by_alias(self) -> None:
        prefs = AppPreferences.model_validate({"darkMode": True, "chartType": "Line Chart"})
        assert prefs.dark_mode is True
        assert prefs.chart_type == "Line Chart"

    def test_dump_by_alias_uses_persisted_keys(self) -> None:
        data = NotificationSettings().model_dump(by_alias=True)
        assert set(data) == set(keys_for(SettingCategory.NOTIFICATIONS))

    def test_types_are_strict(self) -> None:
        with pytest.raises(ValidationError):
            AppPreferences(animations_level="50")
        with pytest.raises(ValidationError):
            NotificationSettings(notify_bills="yes")

    def test_models_are_frozen(self) -> None:
        with pytest.raises(ValidationError):
            AccountSettings().full_name = "Mallory"


class TestRegistry:
    """The flat key table derived from the models."""

    def test_registry_matches_documented_defaults(self) -> None:
        assert {key: spec.default for key, spec in SETTINGS.items()} == DEFAULTS

    def test_every_value_type_matches_default(self) -> None:
        for spec in SETTINGS.values():
            assert type(spec.default) is spec.value_type, spec.key

    def test_category_sizes(self) -> None:
        assert len(keys_for(SettingCategory.ACCOUNT)) == 9
        assert len(resettable_keys(SettingCategory.ACCOUNT)) == 8
        assert len(keys_for(SettingCategory.APP_PREFERENCES)) == 11
        assert len(keys_for(SettingCategory.NOTIFICATIONS)) == 13

    def test_categories_are_disjoint(self) -> None:
        seen: set[str] = set()
        for category in SettingCategory:
            keys = set(keys_for(category))
            assert not keys & seen
            seen |= keys
        assert seen == set(SETTINGS)

    def test_account_created_is_not_user_editable(self) -> None:
        spec = spec_for("accountCreated")
        assert spec.category is SettingCategory.ACCOUNT
        assert spec.user_editable is False

    def test_spec_for_unknown_key(self) -> None:
        with pytest.raises(UnknownSettingError, match="theme"):
            spec_for("theme")

    def test_every_category_has_a_model(self) -> None:
        assert set(CATEGORY_MODELS) == set(SettingCategory)
        for category, model in CATEGORY_MODELS.items():
            assert category_of(model()) is category

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("account", SettingCategory.ACCOUNT),
            ("App-Preferences", SettingCategory.APP_PREFERENCES),
            ("app preferences", SettingCategory.APP_PREFERENCES),
            (SettingCategory.NOTIFICATIONS, SettingCategory.NOTIFICATIONS),
        ],
    )
    def test_parse_category(self, raw, expected) -> None:
        assert parse_category(raw) is expected

    def test_parse_unknown_category(self) -> None:
        with pytest.raises(UnknownSettingError, match="expected one of"):
            parse_category("billing")

    def test_labels(self) -> None:
        assert SettingCategory.APP_PREFERENCES.label == "App Preferences"


class TestOptionLists:
    """Defaults are among the choices the settings screens offer."""

    def test_defaults_are_offered(self) -> None:
        assert DEFAULTS["currency"] in constants.CURRENCIES
        assert DEFAULTS["fontSize"] in constants.FONT_SIZES
        assert DEFAULTS["language"] in constants.LANGUAGES
        assert DEFAULTS["dateFormat"] in constants.DATE_FORMATS
        assert DEFAULTS["timeFormat"] in constants.TIME_FORMATS
        assert DEFAULTS["defaultView"] in constants.DEFAULT_VIEWS
        assert DEFAULTS["notifyFrequency"] in constants.NOTIFY_FREQUENCIES
        assert DEFAULTS["quietFrom"] in constants.QUIET_HOURS
        assert DEFAULTS["quietTo"] in constants.QUIET_HOURS
        assert constants.ANIMATIONS_MIN <= DEFAULTS["animationsLevel"] <= constants.ANIMATIONS_MAX
