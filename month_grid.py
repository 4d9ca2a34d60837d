"""Fixed 6×7 day grid for one displayed month."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from calendar_logic import (
    DAYS_PER_WEEK,
    LocaleCalendar,
    days_in_month,
    leading_offset,
    prev_month,
)

WEEK_COUNT = 6


class CellKind(Enum):
    PREVIOUS_MONTH = "previous"
    CURRENT_MONTH = "current"
    NEXT_MONTH = "next"
    EMPTY = "empty"


@dataclass(frozen=True)
class CalendarCell:
    day: int
    kind: CellKind

    @property
    def in_month(self) -> bool:
        return self.kind is CellKind.CURRENT_MONTH

    @property
    def is_empty(self) -> bool:
        return self.kind is CellKind.EMPTY


EMPTY_CELL = CalendarCell(0, CellKind.EMPTY)


@dataclass(frozen=True)
class MonthGrid:
    """Immutable snapshot of one month; rebuilt wholesale on navigation."""

    year: int
    month: int
    title: str
    month_length: int
    leading_offset: int
    first_day_of_week: int
    rows: tuple[tuple[CalendarCell, ...], ...]

    def cell(self, week: int, day: int) -> CalendarCell:
        return self.rows[week][day]

    def cells(self) -> list[CalendarCell]:
        return [c for row in self.rows for c in row]

    def in_month_days(self) -> list[int]:
        return [c.day for c in self.cells() if c.in_month]

    @property
    def weekday_order(self) -> list[int]:
        """Weekday indexes for the header columns, left to right."""
        return [(self.first_day_of_week + i) % DAYS_PER_WEEK for i in range(DAYS_PER_WEEK)]


def build(locale: LocaleCalendar, year: int, month: int) -> MonthGrid:
    """Return the 6×7 grid for the given month in the locale's week order.

    Row 0 starts with the tail of the previous month, then days 1..N follow
    row-major.  The last populated row is completed with the head of the next
    month; any rows after it stay empty.
    """
    length = days_in_month(locale, year, month)
    lead = leading_offset(locale, year, month)
    prev_year, prev_m = prev_month(locale, year, month)
    prev_length = days_in_month(locale, prev_year, prev_m)

    flat: list[CalendarCell] = [
        CalendarCell(prev_length - lead + 1 + i, CellKind.PREVIOUS_MONTH)
        for i in range(lead)
    ]
    flat.extend(CalendarCell(d, CellKind.CURRENT_MONTH) for d in range(1, length + 1))

    trailing = -len(flat) % DAYS_PER_WEEK
    flat.extend(CalendarCell(d, CellKind.NEXT_MONTH) for d in range(1, trailing + 1))

    # Pad to exactly 6 rows so the grid height stays constant
    flat.extend([EMPTY_CELL] * (WEEK_COUNT * DAYS_PER_WEEK - len(flat)))

    rows = tuple(
        tuple(flat[r * DAYS_PER_WEEK:(r + 1) * DAYS_PER_WEEK])
        for r in range(WEEK_COUNT)
    )
    return MonthGrid(
        year=year,
        month=month,
        title=f"{locale.month_name(month)} {year}",
        month_length=length,
        leading_offset=lead,
        first_day_of_week=locale.first_day_of_week,
        rows=rows,
    )
