"""SpentWise — settings persistence for the SpentWise personal finance app."""

from spentwise.application.settings_store import OperationResult, SettingsStore
from spentwise.domain.models.enums import SettingCategory

__version__ = "0.1.0"

__all__ = ["OperationResult", "SettingCategory", "SettingsStore", "__version__"]
