"""
Shared fixtures: a non-Gregorian calendar provider for the locale-aware paths.
"""
from datetime import date

import pytest

from calendar_logic import LocaleCalendar

BUDDHIST_ERA_OFFSET = 543


class BuddhistCalendar(LocaleCalendar):
    """Thai solar calendar: Gregorian months and days, years counted from 543 BC."""

    def days_in_month(self, year, month):
        return super().days_in_month(year - BUDDHIST_ERA_OFFSET, month)

    def weekday(self, year, month, day):
        return super().weekday(year - BUDDHIST_ERA_OFFSET, month, day)

    def is_leap(self, year):
        return super().is_leap(year - BUDDHIST_ERA_OFFSET)

    def to_date(self, year, month, day):
        return date(year - BUDDHIST_ERA_OFFSET, month, day)

    def from_date(self, d):
        return d.year + BUDDHIST_ERA_OFFSET, d.month, d.day


@pytest.fixture
def buddhist():
    return BuddhistCalendar.monday_first()
