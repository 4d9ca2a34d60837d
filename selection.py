"""Map dates to grid coordinates and grid cells back to dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from calendar_logic import DAYS_PER_WEEK, LocaleCalendar, add_months, week_of_year
from month_grid import CellKind, MonthGrid

_MONTH_SHIFT = {
    CellKind.PREVIOUS_MONTH: -1,
    CellKind.CURRENT_MONTH: 0,
    CellKind.NEXT_MONTH: 1,
}


@dataclass(frozen=True)
class SelectedMarker:
    week: int
    weekday: int


def locate(grid: MonthGrid, selected: date | None,
           locale: LocaleCalendar) -> SelectedMarker | None:
    """Grid coordinate of *selected*, or None when it is not in the grid's month.

    Overflow cells are never marked, even when their day number matches.
    """
    if selected is None:
        return None
    year, month, day = locale.from_date(selected)
    if (year, month) != (grid.year, grid.month):
        return None
    week = (grid.leading_offset + day - 1) // DAYS_PER_WEEK
    weekday = (locale.weekday(year, month, day) - locale.first_day_of_week) % DAYS_PER_WEEK
    return SelectedMarker(week, weekday)


def resolve_cell_date(grid: MonthGrid, week_index: int, day_index: int,
                      locale: LocaleCalendar) -> date | None:
    """Actual date shown at (week_index, day_index); None for empty cells."""
    cell = grid.cell(week_index, day_index)
    if cell.is_empty:
        return None
    year, month = add_months(locale, grid.year, grid.month, _MONTH_SHIFT[cell.kind])
    return locale.to_date(year, month, cell.day)


def week_numbers(grid: MonthGrid, locale: LocaleCalendar) -> list[int | None]:
    """Week-of-year for each of the 6 rows, from the row's first column.

    Rows that are entirely empty get None.
    """
    weeks: list[int | None] = []
    for r in range(len(grid.rows)):
        d = resolve_cell_date(grid, r, 0, locale)
        if d is None:
            weeks.append(None)
        else:
            weeks.append(week_of_year(locale, *locale.from_date(d)))
    return weeks
