"""Settings store — typed, defaulted, categorized access to user preferences.

The store is the only component that talks to the preference backend. The
presentation layer reads current values through the typed getters to fill
its controls and writes them back through one bulk save per category.

Failure policy
--------------
Configuration problems must never block startup or the UI:

* getters never raise; an absent, unreadable or wrongly-typed value reads as
  the setting's declared default;
* saves and resets never raise; a backend failure is logged and reported in
  the returned :class:`OperationResult`, and the backend guarantees the
  previous committed state is left intact. Nothing is retried.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from spentwise.domain.errors import PreferenceStorageError
from spentwise.domain.models.enums import SettingCategory
from spentwise.domain.models.registry import (
    CATEGORY_MODELS,
    SETTINGS,
    SettingSpec,
    category_of,
    parse_category,
    resettable_keys,
    spec_for,
    specs_for,
)
from spentwise.domain.models.settings import (
    AccountSettings,
    AppPreferences,
    CategorySettings,
    NotificationSettings,
)
from spentwise.domain.ports.preference_backend import PreferenceBackendPort

logger = logging.getLogger(__name__)

_ACCOUNT_CREATED = "accountCreated"
_BACKEND_ERRORS = (PreferenceStorageError, OSError)


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a bulk save or reset.

    ``category`` is ``None`` for :meth:`SettingsStore.reset_all_settings`.
    """

    operation: str
    category: SettingCategory | None
    keys: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the backend applied the whole key set."""
        return self.error is None


def coerce_value(spec: SettingSpec, raw: Any) -> Any:
    """Return *raw* as ``spec.value_type`` or ``spec.default`` if impossible.

    String forms of booleans and integers are accepted since platform
    preference stores commonly keep every value as text.
    """
    if raw is None:
        return spec.default

    if spec.value_type is bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
            return raw.strip().lower() == "true"
    elif spec.value_type is int:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw.strip())
            except ValueError:
                pass
    elif isinstance(raw, str):
        return raw

    logger.warning(
        "Stored value for %r has wrong type (%s), using default %r",
        spec.key,
        type(raw).__name__,
        spec.default,
    )
    return spec.default


class SettingsStore:
    """Categorized key/value settings over a :class:`PreferenceBackendPort`.

    Create one per process (see ``bootstrap.Container``) and hand it to the
    consumers that need configuration.
    """

    def __init__(self, backend: PreferenceBackendPort) -> None:
        self._backend = backend
        self._lock = threading.RLock()

    # -- Generic access ------------------------------------------------------

    def get(self, key: str) -> Any:
        """Effective value of the setting persisted under *key*.

        Raises
        ------
        UnknownSettingError
            If *key* is not a registered setting.
        """
        spec = spec_for(key)
        try:
            raw = self._backend.get(key)
        except _BACKEND_ERRORS as exc:
            logger.error("Could not read setting %r, using default: %s", key, exc)
            return spec.default
        return coerce_value(spec, raw)

    def load(self, category: SettingCategory | str) -> CategorySettings:
        """Every effective value of *category* as its settings model."""
        category = parse_category(category)
        values = {spec.key: self.get(spec.key) for spec in specs_for(category)}
        return CATEGORY_MODELS[category].model_validate(values)

    def snapshot(self) -> dict[str, Any]:
        """Effective value of every registered setting, keyed by persisted key."""
        return {key: self.get(key) for key in SETTINGS}

    def is_customized(self, key: str) -> bool:
        """True if *key* currently holds a stored value rather than its default."""
        spec_for(key)
        try:
            return self._backend.contains(key)
        except _BACKEND_ERRORS as exc:
            logger.error("Could not query setting %r: %s", key, exc)
            return False

    def save(self, settings: CategorySettings) -> OperationResult:
        """Bulk-save every user-editable field of a category model."""
        category = category_of(settings)
        values = {
            spec.key: getattr(settings, spec.field_name)
            for spec in specs_for(category)
            if spec.user_editable
        }
        return self._put(category, values)

    def reset(self, category: SettingCategory | str) -> OperationResult:
        """Remove the user-editable keys of *category*; other categories are untouched."""
        category = parse_category(category)
        keys = resettable_keys(category)
        with self._lock:
            try:
                self._backend.remove_many(keys)
            except _BACKEND_ERRORS as exc:
                return self._failed("reset", category, keys, exc)
        logger.info("Reset %s settings (%d keys)", category.value, len(keys))
        return OperationResult("reset", category, keys)

    # -- Account -------------------------------------------------------------

    def save_account_settings(
        self,
        full_name: str,
        date_of_birth: str,
        username: str,
        email: str,
        phone: str,
        address: str,
        currency: str,
        two_factor_enabled: bool,
    ) -> OperationResult:
        """Save the account form. No validation of the field contents."""
        return self._save_model(
            AccountSettings,
            full_name=full_name,
            date_of_birth=date_of_birth,
            username=username,
            email=email,
            phone=phone,
            address=address,
            currency=currency,
            two_factor_auth=two_factor_enabled,
        )

    def load_account_settings(self) -> AccountSettings:
        return self.load(SettingCategory.ACCOUNT)

    def reset_account_settings(self) -> OperationResult:
        return self.reset(SettingCategory.ACCOUNT)

    def mark_account_created(self, when: date | None = None) -> OperationResult:
        """Record the profile creation date, unless one is already stored."""
        with self._lock:
            if self.get(_ACCOUNT_CREATED):
                return OperationResult("save", SettingCategory.ACCOUNT)
            stamp = (when or date.today()).isoformat()
            return self._put(SettingCategory.ACCOUNT, {_ACCOUNT_CREATED: stamp})

    def get_full_name(self) -> str:
        return self.get("fullName")

    def get_date_of_birth(self) -> str:
        return self.get("dateOfBirth")

    def get_username(self) -> str:
        return self.get("username")

    def get_email(self) -> str:
        return self.get("email")

    def get_phone(self) -> str:
        return self.get("phone")

    def get_address(self) -> str:
        return self.get("address")

    def get_account_created(self) -> str:
        """ISO date the profile was created, ``""`` if never recorded."""
        return self.get(_ACCOUNT_CREATED)

    def get_currency(self) -> str:
        return self.get("currency")

    def get_two_factor_auth(self) -> bool:
        return self.get("twoFactorAuth")

    # -- App preferences -----------------------------------------------------

    def save_app_preferences(
        self,
        dark_mode: bool,
        font_size: str,
        language: str,
        date_format: str,
        time_format: str,
        start_on_boot: bool,
        start_minimized: bool,
        auto_backup: bool,
        default_view: str,
        chart_type: str,
        animations_level: int,
    ) -> OperationResult:
        """Save the app preferences form."""
        return self._save_model(
            AppPreferences,
            dark_mode=dark_mode,
            font_size=font_size,
            language=language,
            date_format=date_format,
            time_format=time_format,
            start_on_boot=start_on_boot,
            start_minimized=start_minimized,
            auto_backup=auto_backup,
            default_view=default_view,
            chart_type=chart_type,
            animations_level=animations_level,
        )

    def load_app_preferences(self) -> AppPreferences:
        return self.load(SettingCategory.APP_PREFERENCES)

    def reset_app_preferences(self) -> OperationResult:
        return self.reset(SettingCategory.APP_PREFERENCES)

    def get_dark_mode(self) -> bool:
        return self.get("darkMode")

    def get_font_size(self) -> str:
        return self.get("fontSize")

    def get_language(self) -> str:
        return self.get("language")

    def get_date_format(self) -> str:
        return self.get("dateFormat")

    def get_time_format(self) -> str:
        return self.get("timeFormat")

    def get_start_on_boot(self) -> bool:
        return self.get("startOnBoot")

    def get_start_minimized(self) -> bool:
        return self.get("startMinimized")

    def get_auto_backup(self) -> bool:
        return self.get("autoBackup")

    def get_default_view(self) -> str:
        return self.get("defaultView")

    def get_chart_type(self) -> str:
        return self.get("chartType")

    def get_animations_level(self) -> int:
        return self.get("animationsLevel")

    # -- Notifications -------------------------------------------------------

    def save_notification_settings(
        self,
        notify_bills: bool,
        notify_subscriptions: bool,
        notify_weekly: bool,
        notify_overspend: bool,
        notify_motivation: bool,
        frequency: str,
        notify_time: str,
        notify_email: bool,
        notify_desktop: bool,
        notify_push: bool,
        quiet_hours_enabled: bool,
        quiet_from: str,
        quiet_to: str,
    ) -> OperationResult:
        """Save the notifications form."""
        return self._save_model(
            NotificationSettings,
            notify_bills=notify_bills,
            notify_subscriptions=notify_subscriptions,
            notify_weekly=notify_weekly,
            notify_overspend=notify_overspend,
            notify_motivation=notify_motivation,
            notify_frequency=frequency,
            notify_time=notify_time,
            notify_email=notify_email,
            notify_desktop=notify_desktop,
            notify_push=notify_push,
            quiet_hours=quiet_hours_enabled,
            quiet_from=quiet_from,
            quiet_to=quiet_to,
        )

    def load_notification_settings(self) -> NotificationSettings:
        return self.load(SettingCategory.NOTIFICATIONS)

    def reset_notification_settings(self) -> OperationResult:
        return self.reset(SettingCategory.NOTIFICATIONS)

    def get_notify_bills(self) -> bool:
        return self.get("notifyBills")

    def get_notify_subscriptions(self) -> bool:
        return self.get("notifySubscriptions")

    def get_notify_weekly(self) -> bool:
        return self.get("notifyWeekly")

    def get_notify_overspend(self) -> bool:
        return self.get("notifyOverspend")

    def get_notify_motivation(self) -> bool:
        return self.get("notifyMotivation")

    def get_notify_frequency(self) -> str:
        return self.get("notifyFrequency")

    def get_notify_time(self) -> str:
        return self.get("notifyTime")

    def get_notify_email(self) -> bool:
        return self.get("notifyEmail")

    def get_notify_desktop(self) -> bool:
        return self.get("notifyDesktop")

    def get_notify_push(self) -> bool:
        return self.get("notifyPush")

    def get_quiet_hours(self) -> bool:
        return self.get("quietHours")

    def get_quiet_from(self) -> str:
        return self.get("quietFrom")

    def get_quiet_to(self) -> str:
        return self.get("quietTo")

    # -- Whole store ---------------------------------------------------------

    def reset_all_settings(self) -> OperationResult:
        """Remove every stored key, whatever its category."""
        keys = tuple(SETTINGS)
        with self._lock:
            try:
                self._backend.clear()
            except _BACKEND_ERRORS as exc:
                return self._failed("reset", None, keys, exc)
        logger.info("Reset all settings")
        return OperationResult("reset", None, keys)

    # -- Internals -----------------------------------------------------------

    def _save_model(self, model_cls: type[BaseModel], **fields: Any) -> OperationResult:
        category = next(c for c, m in CATEGORY_MODELS.items() if m is model_cls)
        try:
            settings = model_cls(**fields)
        except ValidationError as exc:
            keys = tuple(spec.key for spec in specs_for(category) if spec.user_editable)
            logger.error(
                "Rejected %s settings, nothing written: %d invalid field(s)",
                category.value,
                exc.error_count(),
            )
            return OperationResult("save", category, keys, error=str(exc))
        return self.save(settings)

    def _put(self, category: SettingCategory, values: Mapping[str, Any]) -> OperationResult:
        keys = tuple(values)
        with self._lock:
            try:
                self._backend.put_many(values)
            except _BACKEND_ERRORS as exc:
                return self._failed("save", category, keys, exc)
        logger.debug("Saved %s settings: %s", category.value, ", ".join(keys))
        return OperationResult("save", category, keys)

    @staticmethod
    def _failed(
        operation: str,
        category: SettingCategory | None,
        keys: tuple[str, ...],
        exc: Exception,
    ) -> OperationResult:
        scope = category.value if category else "all"
        logger.error("Failed to %s %s settings: %s", operation, scope, exc)
        return OperationResult(operation, category, keys, error=str(exc))
