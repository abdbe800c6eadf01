"""Domain errors — custom exceptions for SpentWise.

These exceptions are raised by the backend and registry layers and caught at
the settings store boundary. They carry no infrastructure dependencies.
"""


class SpentWiseError(Exception):
    """Base exception for all SpentWise errors."""


class PreferenceStorageError(SpentWiseError):
    """Raised when the backing preference store cannot be read or written."""


class UnknownSettingError(SpentWiseError, KeyError):
    """Raised when a key or category is not part of the settings registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class ConfigurationError(SpentWiseError):
    """Raised when the settings registry or storage configuration is invalid."""
