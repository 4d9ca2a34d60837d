"""Min/max date bounds and the selectability checks built on them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum

from calendar_logic import LocaleCalendar

YEAR_RANGE_SIZE = 12


class Direction(IntEnum):
    PREVIOUS = -1
    NEXT = 1


@dataclass(frozen=True)
class DateBounds:
    """Optional inclusive [min_date, max_date] range.

    min_date <= max_date is the caller's responsibility.
    """

    min_date: date | None = None
    max_date: date | None = None

    def contains(self, d: date) -> bool:
        if self.min_date is not None and d < self.min_date:
            return False
        if self.max_date is not None and d > self.max_date:
            return False
        return True

    def clamp(self, d: date) -> date:
        if self.min_date is not None and d < self.min_date:
            d = self.min_date
        if self.max_date is not None and d > self.max_date:
            d = self.max_date
        return d

    def in_locale(self, locale: LocaleCalendar) -> tuple[tuple[int, int, int] | None,
                                                         tuple[int, int, int] | None]:
        """Both bounds as (year, month, day) in the locale's calendar."""
        lo = None if self.min_date is None else locale.from_date(self.min_date)
        hi = None if self.max_date is None else locale.from_date(self.max_date)
        return lo, hi


def is_day_selectable(locale: LocaleCalendar, year: int, month: int, day: int,
                      bounds: DateBounds) -> bool:
    """True when the locale date year/month/day lies inside *bounds*."""
    return bounds.contains(locale.to_date(year, month, day))


def is_month_selectable(locale: LocaleCalendar, year: int, month: int,
                        bounds: DateBounds) -> bool:
    """True when any day of the locale month can lie inside *bounds*."""
    lo, hi = bounds.in_locale(locale)
    if hi is not None and (year, month) > hi[:2]:
        return False
    if lo is not None and (year, month) < lo[:2]:
        return False
    return True


def is_year_selectable(locale: LocaleCalendar, year: int, bounds: DateBounds) -> bool:
    """True when the locale year overlaps *bounds*."""
    lo, hi = bounds.in_locale(locale)
    if hi is not None and year > hi[0]:
        return False
    if lo is not None and year < lo[0]:
        return False
    return True


def can_step_month(locale: LocaleCalendar, direction: Direction, display_year: int,
                   current_month: int, bounds: DateBounds) -> bool:
    """False when stepping one month in *direction* would leave the range."""
    direction = Direction(direction)
    lo, hi = bounds.in_locale(locale)
    here = (display_year, current_month)
    if direction is Direction.NEXT and hi is not None:
        return here < hi[:2]
    if direction is Direction.PREVIOUS and lo is not None:
        return here > lo[:2]
    return True


def can_step_year(locale: LocaleCalendar, direction: Direction, display_year: int,
                  bounds: DateBounds) -> bool:
    """False when stepping one year in *direction* would leave the range."""
    direction = Direction(direction)
    lo, hi = bounds.in_locale(locale)
    if direction is Direction.NEXT and hi is not None:
        return display_year < hi[0]
    if direction is Direction.PREVIOUS and lo is not None:
        return display_year > lo[0]
    return True


def can_step_year_range(locale: LocaleCalendar, direction: Direction, year_range_from: int,
                        bounds: DateBounds) -> bool:
    """Guard for moving the 12-year picker window."""
    direction = Direction(direction)
    lo, hi = bounds.in_locale(locale)
    if direction is Direction.NEXT and hi is not None:
        return hi[0] >= year_range_from + YEAR_RANGE_SIZE
    if direction is Direction.PREVIOUS and lo is not None:
        return lo[0] < year_range_from
    return True
