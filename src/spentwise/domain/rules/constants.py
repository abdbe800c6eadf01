"""Option lists offered by the SpentWise settings screens.

Informational only: the settings store persists whatever the presentation
layer hands it and does not validate against these lists.
"""

from __future__ import annotations

CURRENCIES: tuple[str, ...] = (
    "USD ($)",
    "EUR (€)",
    "GBP (£)",
    "JPY (¥)",
    "CAD ($)",
    "AUD ($)",
    "INR (₹)",
)

FONT_SIZES: tuple[str, ...] = ("Small", "Medium", "Large")

LANGUAGES: tuple[str, ...] = (
    "English",
    "Spanish",
    "French",
    "German",
    "Chinese",
    "Japanese",
)

DATE_FORMATS: tuple[str, ...] = ("MM/DD/YYYY", "DD/MM/YYYY", "YYYY-MM-DD")

TIME_FORMATS: tuple[str, ...] = ("12-hour (AM/PM)", "24-hour")

DEFAULT_VIEWS: tuple[str, ...] = ("Monthly", "Weekly", "Yearly", "Custom")

NOTIFY_FREQUENCIES: tuple[str, ...] = ("Daily", "Weekly", "Monthly")

# Quiet hours are picked from whole hours, "00:00" .. "23:00"
QUIET_HOURS: tuple[str, ...] = tuple(f"{h:02d}:00" for h in range(24))

ANIMATIONS_MIN = 0
ANIMATIONS_MAX = 100
