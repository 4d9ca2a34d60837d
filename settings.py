"""JSON-based settings persistence for the date picker."""

import json
import os
from datetime import date

from calendar_logic import LocaleCalendar
from constraints import DateBounds

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-datepicker-settings.json")

_DEFAULTS = {
    "first_day_of_week": 0,
    "locale": None,
    "min_date": None,
    "max_date": None,
    "show_week_numbers": False,
    "show_go_to_today": True,
    "month_picker_overlay": False,
    "highlight_current_month": False,
    "highlight_selected_month": False,
    "log_level": "WARNING",
}

_BOOL_KEYS = (
    "show_week_numbers",
    "show_go_to_today",
    "month_picker_overlay",
    "highlight_current_month",
    "highlight_selected_month",
)
_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _parse_date(value) -> str | None:
    """Return *value* if it is an ISO date string, else None."""
    if not isinstance(value, str):
        return None
    try:
        date.fromisoformat(value)
    except ValueError:
        return None
    return value


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing or invalid keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return settings
    if not isinstance(stored, dict):
        return settings

    fdow = stored.get("first_day_of_week")
    if isinstance(fdow, int) and not isinstance(fdow, bool) and 0 <= fdow <= 6:
        settings["first_day_of_week"] = fdow
    if isinstance(stored.get("locale"), str):
        settings["locale"] = stored["locale"]
    for key in ("min_date", "max_date"):
        settings[key] = _parse_date(stored.get(key))
    for key in _BOOL_KEYS:
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    level = stored.get("log_level")
    if isinstance(level, str) and level.upper() in _LOG_LEVELS:
        settings["log_level"] = level.upper()
    return settings


def save_settings(settings: dict, path: str | None = None) -> None:
    """Persist settings to disk."""
    with open(path or _SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)


def locale_from_settings(settings: dict) -> LocaleCalendar:
    return LocaleCalendar(settings["first_day_of_week"], settings["locale"])


def bounds_from_settings(settings: dict) -> DateBounds:
    lo, hi = settings["min_date"], settings["max_date"]
    return DateBounds(
        date.fromisoformat(lo) if lo else None,
        date.fromisoformat(hi) if hi else None,
    )
