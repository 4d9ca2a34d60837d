"""
Unit tests for constraints.
"""
from datetime import date

import pytest

from calendar_logic import LocaleCalendar
from constraints import (
    DateBounds,
    Direction,
    can_step_month,
    can_step_year,
    can_step_year_range,
    is_day_selectable,
    is_month_selectable,
    is_year_selectable,
)

GREGORIAN = LocaleCalendar.monday_first()

UNBOUNDED = DateBounds()
MIN_JUNE_15 = DateBounds(min_date=date(2024, 6, 15))
MAX_MARCH_1 = DateBounds(max_date=date(2025, 3, 1))
BOTH = DateBounds(date(2024, 6, 15), date(2025, 3, 1))


# ---------------------------------------------------------------------------
# DateBounds
# ---------------------------------------------------------------------------

def test_clamp_below_min():
    assert BOTH.clamp(date(2024, 1, 1)) == date(2024, 6, 15)


def test_clamp_above_max():
    assert BOTH.clamp(date(2030, 1, 1)) == date(2025, 3, 1)


def test_clamp_inside_range_is_identity():
    assert BOTH.clamp(date(2024, 9, 9)) == date(2024, 9, 9)


def test_unbounded_contains_everything():
    assert UNBOUNDED.contains(date(1, 1, 1))
    assert UNBOUNDED.contains(date(9999, 12, 31))


# ---------------------------------------------------------------------------
# day / month / year selectability
# ---------------------------------------------------------------------------

def test_day_bounds_are_inclusive():
    assert is_day_selectable(GREGORIAN, 2024, 6, 15, BOTH)
    assert is_day_selectable(GREGORIAN, 2025, 3, 1, BOTH)


def test_day_before_min_rejected():
    assert not is_day_selectable(GREGORIAN, 2024, 6, 10, MIN_JUNE_15)


def test_day_after_max_rejected():
    assert not is_day_selectable(GREGORIAN, 2025, 3, 2, MAX_MARCH_1)


def test_month_containing_min_is_selectable():
    assert is_month_selectable(GREGORIAN, 2024, 6, MIN_JUNE_15)
    assert not is_month_selectable(GREGORIAN, 2024, 5, MIN_JUNE_15)


def test_month_containing_max_is_selectable():
    assert is_month_selectable(GREGORIAN, 2025, 3, MAX_MARCH_1)
    assert not is_month_selectable(GREGORIAN, 2025, 4, MAX_MARCH_1)
    assert not is_month_selectable(GREGORIAN, 2026, 1, MAX_MARCH_1)


def test_year_selectable():
    assert is_year_selectable(GREGORIAN, 2024, BOTH)
    assert is_year_selectable(GREGORIAN, 2025, BOTH)
    assert not is_year_selectable(GREGORIAN, 2023, BOTH)
    assert not is_year_selectable(GREGORIAN, 2026, BOTH)


# ---------------------------------------------------------------------------
# stepping guards
# ---------------------------------------------------------------------------

def test_cannot_step_month_before_min_month():
    assert not can_step_month(GREGORIAN, Direction.PREVIOUS, 2024, 6, MIN_JUNE_15)
    assert can_step_month(GREGORIAN, Direction.PREVIOUS, 2024, 7, MIN_JUNE_15)


def test_cannot_step_month_past_max_month():
    assert not can_step_month(GREGORIAN, Direction.NEXT, 2025, 3, MAX_MARCH_1)
    assert can_step_month(GREGORIAN, Direction.NEXT, 2025, 2, MAX_MARCH_1)


def test_min_bound_does_not_block_next():
    assert can_step_month(GREGORIAN, Direction.NEXT, 2024, 6, MIN_JUNE_15)


def test_step_year_guard():
    assert not can_step_year(GREGORIAN, Direction.NEXT, 2025, MAX_MARCH_1)
    assert can_step_year(GREGORIAN, Direction.NEXT, 2024, MAX_MARCH_1)
    assert not can_step_year(GREGORIAN, Direction.PREVIOUS, 2024, MIN_JUNE_15)
    assert can_step_year(GREGORIAN, Direction.PREVIOUS, 2025, MIN_JUNE_15)


def test_step_year_range_next_needs_max_in_next_window():
    assert not can_step_year_range(GREGORIAN, Direction.NEXT, 2023, DateBounds(max_date=date(2034, 12, 31)))
    assert can_step_year_range(GREGORIAN, Direction.NEXT, 2023, DateBounds(max_date=date(2035, 1, 1)))


def test_step_year_range_previous_needs_min_before_window():
    assert not can_step_year_range(GREGORIAN, Direction.PREVIOUS, 2023, DateBounds(min_date=date(2023, 5, 1)))
    assert can_step_year_range(GREGORIAN, Direction.PREVIOUS, 2023, DateBounds(min_date=date(2022, 5, 1)))


def test_guards_accept_plain_ints():
    assert not can_step_year(GREGORIAN, 1, 2025, MAX_MARCH_1)
    assert can_step_year(GREGORIAN, -1, 2025, MAX_MARCH_1)


def test_unknown_direction_raises():
    with pytest.raises(ValueError):
        can_step_month(GREGORIAN, 0, 2024, 6, UNBOUNDED)


# ---------------------------------------------------------------------------
# non-Gregorian locale: bounds compared in the locale's own numbering
# ---------------------------------------------------------------------------

class TestBuddhistEraBounds:
    """Gregorian 2024 is 2567 in the Buddhist era."""

    def test_in_locale_converts_both_bounds(self, buddhist):
        assert BOTH.in_locale(buddhist) == ((2567, 6, 15), (2568, 3, 1))

    def test_day_before_min_rejected(self, buddhist):
        assert not is_day_selectable(buddhist, 2567, 6, 10, MIN_JUNE_15)
        assert is_day_selectable(buddhist, 2567, 6, 15, MIN_JUNE_15)

    def test_day_after_max_rejected(self, buddhist):
        assert is_day_selectable(buddhist, 2568, 3, 1, MAX_MARCH_1)
        assert not is_day_selectable(buddhist, 2568, 3, 2, MAX_MARCH_1)

    def test_month_selectable(self, buddhist):
        assert not is_month_selectable(buddhist, 2567, 5, MIN_JUNE_15)
        assert is_month_selectable(buddhist, 2567, 6, MIN_JUNE_15)
        assert not is_month_selectable(buddhist, 2568, 4, MAX_MARCH_1)

    def test_year_selectable(self, buddhist):
        assert is_year_selectable(buddhist, 2567, BOTH)
        assert is_year_selectable(buddhist, 2568, BOTH)
        assert not is_year_selectable(buddhist, 2566, BOTH)
        assert not is_year_selectable(buddhist, 2024, BOTH)

    def test_step_month_guard(self, buddhist):
        assert not can_step_month(buddhist, Direction.PREVIOUS, 2567, 6, MIN_JUNE_15)
        assert can_step_month(buddhist, Direction.PREVIOUS, 2567, 7, MIN_JUNE_15)
        assert not can_step_month(buddhist, Direction.NEXT, 2568, 3, MAX_MARCH_1)

    def test_step_year_guard(self, buddhist):
        assert not can_step_year(buddhist, Direction.PREVIOUS, 2567, MIN_JUNE_15)
        assert can_step_year(buddhist, Direction.PREVIOUS, 2568, MIN_JUNE_15)
        assert not can_step_year(buddhist, Direction.NEXT, 2568, MAX_MARCH_1)

    def test_step_year_range_guard(self, buddhist):
        assert not can_step_year_range(buddhist, Direction.PREVIOUS, 2567, MIN_JUNE_15)
        assert can_step_year_range(buddhist, Direction.PREVIOUS, 2568, MIN_JUNE_15)
        assert not can_step_year_range(buddhist, Direction.NEXT, 2557, MAX_MARCH_1)
        assert can_step_year_range(buddhist, Direction.NEXT, 2556, MAX_MARCH_1)
