"""Pure calendar calculations, no UI dependencies.

Every function takes the active :class:`LocaleCalendar` explicitly; there is
no module-level "current locale".
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class LocaleCalendar:
    """Locale/calendar provider used by the grid and constraint code.

    Weekdays use Python's numbering (Monday=0 … Sunday=6).  The shipped
    implementation is proleptic Gregorian; other calendar systems subclass
    and override the primitives below.
    """

    first_day_of_week: int = calendar.MONDAY
    locale_name: str | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.first_day_of_week <= 6:
            raise ValueError(f"first_day_of_week must be 0-6, got {self.first_day_of_week}")

    @classmethod
    def monday_first(cls, locale_name: str | None = None) -> LocaleCalendar:
        return cls(calendar.MONDAY, locale_name)

    @classmethod
    def sunday_first(cls, locale_name: str | None = None) -> LocaleCalendar:
        return cls(calendar.SUNDAY, locale_name)

    # --- primitives ---------------------------------------------------------

    def days_in_month(self, year: int, month: int) -> int:
        return calendar.monthrange(year, month)[1]

    def weekday(self, year: int, month: int, day: int) -> int:
        return calendar.weekday(year, month, day)

    def is_leap(self, year: int) -> bool:
        return calendar.isleap(year)

    def months_in_year(self, year: int) -> int:
        return 12

    def to_date(self, year: int, month: int, day: int) -> date:
        return date(year, month, day)

    def from_date(self, d: date) -> tuple[int, int, int]:
        return d.year, d.month, d.day

    def month_name(self, month: int) -> str:
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1-12, got {month}")
        if self.locale_name:
            with calendar.different_locale(self.locale_name):
                return calendar.month_name[month]
        return calendar.month_name[month]

    def day_abbr(self, weekday: int) -> str:
        if self.locale_name:
            with calendar.different_locale(self.locale_name):
                return calendar.day_abbr[weekday]
        return calendar.day_abbr[weekday]

    def weekday_order(self) -> list[int]:
        """Weekday indexes in display order, starting at the first day of week."""
        return [(self.first_day_of_week + i) % DAYS_PER_WEEK for i in range(DAYS_PER_WEEK)]


def _check_month(locale: LocaleCalendar, year: int, month: int) -> None:
    last = locale.months_in_year(year)
    if not 1 <= month <= last:
        raise ValueError(f"month must be 1-{last}, got {month}")


def days_in_month(locale: LocaleCalendar, year: int, month: int) -> int:
    """Number of days in the month under the locale's calendar."""
    _check_month(locale, year, month)
    return locale.days_in_month(year, month)


def first_weekday_of_month(locale: LocaleCalendar, year: int, month: int) -> int:
    """Absolute weekday index of the 1st of the month."""
    _check_month(locale, year, month)
    return locale.weekday(year, month, 1)


def leading_offset(locale: LocaleCalendar, year: int, month: int) -> int:
    """Number of previous-month cells before day 1 in the first grid row."""
    first = first_weekday_of_month(locale, year, month)
    return (first - locale.first_day_of_week + DAYS_PER_WEEK) % DAYS_PER_WEEK


def add_months(locale: LocaleCalendar, year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) shifted by *delta* months, rolling the year over.

    Year lengths come from ``locale.months_in_year`` so calendars with leap
    months roll over at the right place.
    """
    _check_month(locale, year, month)
    month += delta
    while month > locale.months_in_year(year):
        month -= locale.months_in_year(year)
        year += 1
    while month < 1:
        year -= 1
        month += locale.months_in_year(year)
    return year, month


def prev_month(locale: LocaleCalendar, year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return add_months(locale, year, month, -1)


def next_month(locale: LocaleCalendar, year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    return add_months(locale, year, month, 1)


def week_of_year(locale: LocaleCalendar, year: int, month: int, day: int) -> int:
    """Week number using the first-full-week rule.

    Week 1 begins on the first ``first_day_of_week`` of the year.  Days before
    it belong to the last week of the previous year.
    """
    _check_month(locale, year, month)
    doy = sum(locale.days_in_month(year, m) for m in range(1, month)) + day - 1
    jan1 = locale.weekday(year, 1, 1)
    first_week_start = (locale.first_day_of_week - jan1) % DAYS_PER_WEEK
    if doy >= first_week_start:
        return (doy - first_week_start) // DAYS_PER_WEEK + 1
    last_month = locale.months_in_year(year - 1)
    return week_of_year(locale, year - 1, last_month, locale.days_in_month(year - 1, last_month))
