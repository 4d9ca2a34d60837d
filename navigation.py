"""Date-picker navigation state machine.

The controller owns one :class:`NavigationState` and one :class:`MonthGrid`
snapshot.  Both are replaced wholesale by every action; callers only ever
read them.  Rejected actions return False and leave everything untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Callable

from loguru import logger

from calendar_logic import LocaleCalendar, add_months
from constraints import (
    YEAR_RANGE_SIZE,
    DateBounds,
    Direction,
    can_step_month,
    can_step_year,
    can_step_year_range,
    is_day_selectable,
    is_month_selectable,
    is_year_selectable,
)
from month_grid import MonthGrid, build
from selection import SelectedMarker, locate, resolve_cell_date, week_numbers


class View(Enum):
    DAY_GRID = "day_grid"
    MONTH_PICKER = "month_picker"
    YEAR_PICKER = "year_picker"


@dataclass(frozen=True)
class NavigationState:
    current_year: int
    current_month: int
    display_year: int
    year_range_from: int
    year_range_to: int
    active_view: View = View.DAY_GRID


def _year_window(first_year: int) -> tuple[int, int]:
    return first_year, first_year + YEAR_RANGE_SIZE - 1


class NavigationController:
    """Navigation and selection for a single date-picker instance.

    Not reentrant: callers finish one action before issuing the next.
    """

    def __init__(
        self,
        locale: LocaleCalendar,
        bounds: DateBounds | None = None,
        value: date | None = None,
        *,
        enabled: bool = True,
        read_only: bool = False,
        month_picker_overlay: bool = False,
        on_select: Callable[[date], None] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.enabled = enabled
        self.read_only = read_only
        self.month_picker_overlay = month_picker_overlay
        self.on_select = on_select
        self._today = today
        self._locale = locale
        self._bounds = bounds or DateBounds()
        self._is_open = False
        self._value: date | None = None
        self._state: NavigationState
        self._grid: MonthGrid
        self._marker: SelectedMarker | None
        self._initialise(value)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def grid(self) -> MonthGrid:
        return self._grid

    @property
    def selected_marker(self) -> SelectedMarker | None:
        return self._marker

    @property
    def value(self) -> date | None:
        return self._value

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def locale(self) -> LocaleCalendar:
        return self._locale

    @property
    def bounds(self) -> DateBounds:
        return self._bounds

    def year_range(self) -> list[int]:
        return list(range(self._state.year_range_from, self._state.year_range_to + 1))

    def week_numbers(self) -> list[int | None]:
        return week_numbers(self._grid, self._locale)

    def cell_date(self, week_index: int, day_index: int) -> date | None:
        return resolve_cell_date(self._grid, week_index, day_index, self._locale)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _state_for(self, d: date, view: View = View.DAY_GRID) -> NavigationState:
        year, month, _day = self._locale.from_date(d)
        range_from, range_to = _year_window(year - 1)
        return NavigationState(
            current_year=year,
            current_month=month,
            display_year=year,
            year_range_from=range_from,
            year_range_to=range_to,
            active_view=view,
        )

    def _rebuild(self) -> None:
        self._grid = build(self._locale, self._state.current_year, self._state.current_month)
        self._marker = locate(self._grid, self._value, self._locale)

    def _reject(self, action: str, reason: str) -> bool:
        logger.debug(f"{action} rejected: {reason}")
        return False

    def _initialise(self, value: date | None) -> None:
        self._value = value
        start = value or self._today()
        clamped = self._bounds.clamp(start)
        if clamped != start:
            logger.debug(f"{start} outside {self._bounds}, showing {clamped}")
        self._state = self._state_for(clamped)
        self._rebuild()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def open(self, value: date | None = None, bounds: DateBounds | None = None,
             locale: LocaleCalendar | None = None) -> bool:
        """Initialise from the bound value (or today) and show the day grid."""
        if bounds is not None:
            self._bounds = bounds
        if locale is not None:
            self._locale = locale
        self._initialise(value)
        self._is_open = True
        return True

    def set_value(self, value: date | None) -> None:
        """The bound value changed outside the picker."""
        self._initialise(value)

    def close(self) -> bool:
        """Hide the picker; False when it was already closed."""
        if not self._is_open:
            return False
        self._is_open = False
        return True

    def toggle(self) -> bool:
        """Open or close; opening re-syncs to the bound value's month."""
        if not self.enabled:
            return self._reject("toggle", "disabled")
        self._is_open = not self._is_open
        state = self._state
        if self._is_open:
            if self._value is not None:
                year, month, _day = self._locale.from_date(self._value)
                if (year, month) != (state.current_year, state.current_month):
                    state = replace(state, current_year=year, current_month=month)
            view = View.DAY_GRID if self.month_picker_overlay else state.active_view
            state = replace(state, display_year=state.current_year, active_view=view)
            self._state = state
            self._rebuild()
        return True

    # ------------------------------------------------------------------
    # Day selection
    # ------------------------------------------------------------------
    def select_day(self, week_index: int, day_index: int) -> bool:
        """Commit the date in the cell, then close and notify on_select."""
        if not self.enabled:
            return self._reject("select_day", "disabled")
        if self.read_only:
            return self._reject("select_day", "value is read-only")
        picked = self.cell_date(week_index, day_index)
        if picked is None:
            return self._reject("select_day", f"empty cell ({week_index}, {day_index})")
        year, month, day = self._locale.from_date(picked)
        if not is_day_selectable(self._locale, year, month, day, self._bounds):
            return self._reject("select_day", f"{picked} outside {self._bounds}")

        self._value = picked
        self._state = replace(
            self._state, current_year=year, current_month=month, display_year=year,
        )
        self._rebuild()
        self._is_open = False
        logger.info(f"Selected {picked}")
        if self.on_select is not None:
            self.on_select(picked)
        return True

    # ------------------------------------------------------------------
    # Month / year stepping
    # ------------------------------------------------------------------
    def step_month(self, direction: Direction | int) -> bool:
        """Show the previous or next month in the day grid."""
        direction = Direction(direction)
        if not self.enabled:
            return self._reject("step_month", "disabled")
        state = self._state
        if not can_step_month(self._locale, direction, state.display_year,
                              state.current_month, self._bounds):
            return self._reject("step_month", f"{direction.name} bound reached")

        year, month = add_months(self._locale, state.current_year, state.current_month, direction)
        self._state = replace(state, current_year=year, current_month=month, display_year=year)
        self._rebuild()
        return True

    def step_year(self, direction: Direction | int) -> bool:
        """Move the month picker's display year by one."""
        direction = Direction(direction)
        if not self.enabled:
            return self._reject("step_year", "disabled")
        if not can_step_year(self._locale, direction, self._state.display_year, self._bounds):
            return self._reject("step_year", f"{direction.name} bound reached")

        self._state = replace(self._state, display_year=self._state.display_year + direction)
        self._rebuild()
        return True

    def step_year_range(self, direction: Direction | int) -> bool:
        """Page the year picker by a whole window of years."""
        direction = Direction(direction)
        if not self.enabled:
            return self._reject("step_year_range", "disabled")
        if not can_step_year_range(self._locale, direction, self._state.year_range_from,
                                   self._bounds):
            return self._reject("step_year_range", f"{direction.name} bound reached")

        range_from, range_to = _year_window(
            self._state.year_range_from + direction * YEAR_RANGE_SIZE)
        self._state = replace(self._state, year_range_from=range_from, year_range_to=range_to)
        return True

    # ------------------------------------------------------------------
    # Month / year pickers
    # ------------------------------------------------------------------
    def pick_month(self, month: int) -> bool:
        """Show *month* of the display year in the day grid."""
        if not self.enabled:
            return self._reject("pick_month", "disabled")
        display_year = self._state.display_year
        if not 1 <= month <= self._locale.months_in_year(display_year):
            return self._reject("pick_month", f"invalid month {month}")
        if not is_month_selectable(self._locale, display_year, month, self._bounds):
            return self._reject("pick_month", f"{display_year}-{month:02} outside {self._bounds}")

        view = View.DAY_GRID if self.month_picker_overlay else self._state.active_view
        self._state = replace(
            self._state, current_year=display_year, current_month=month, active_view=view,
        )
        self._rebuild()
        return True

    def pick_year(self, year: int) -> bool:
        """Choose *year* and move on to the month picker."""
        if not self.enabled:
            return self._reject("pick_year", "disabled")
        if not is_year_selectable(self._locale, year, self._bounds):
            return self._reject("pick_year", f"{year} outside {self._bounds}")

        range_from, range_to = _year_window(year - 1)
        self._state = replace(
            self._state,
            current_year=year,
            display_year=year,
            year_range_from=range_from,
            year_range_to=range_to,
            active_view=View.MONTH_PICKER,
        )
        self._rebuild()
        return True

    def toggle_month_year_view(self) -> bool:
        """Flip between the month picker and the year picker."""
        if not self.enabled:
            return self._reject("toggle_month_year_view", "disabled")
        if self._state.active_view is View.YEAR_PICKER:
            view = View.MONTH_PICKER
        else:
            view = View.YEAR_PICKER
        self._state = replace(self._state, active_view=view)
        return True

    def toggle_month_picker(self) -> bool:
        """Switch the overlay month picker on or off over the day grid."""
        if not self.enabled:
            return self._reject("toggle_month_picker", "disabled")
        if self._state.active_view is View.DAY_GRID:
            view = View.MONTH_PICKER
        else:
            view = View.DAY_GRID
        self._state = replace(self._state, active_view=view)
        return True

    def go_to_today(self) -> bool:
        """Recentre on today.  Bounds are not applied here."""
        if not self.enabled:
            return self._reject("go_to_today", "disabled")
        self._state = self._state_for(self._today(), self._state.active_view)
        self._rebuild()
        return True

    # ------------------------------------------------------------------
    # Predicates for the rendering layer
    # ------------------------------------------------------------------
    def is_go_to_today_disabled(self) -> bool:
        year, month, _day = self._locale.from_date(self._today())
        state = self._state
        on_today = (state.current_year, state.current_month) == (year, month)
        if self.month_picker_overlay:
            return on_today and (state.year_range_from, state.year_range_to) == _year_window(year - 1)
        return on_today

    def is_month_selected(self, month: int) -> bool:
        return month == self._state.current_month

    def is_year_selected(self, year: int) -> bool:
        return year == self._state.current_year

    def is_current_month(self, month: int) -> bool:
        return month == self._locale.from_date(self._today())[1]

    def is_today(self, week_index: int, day_index: int) -> bool:
        if not self._grid.cell(week_index, day_index).in_month:
            return False
        return self.cell_date(week_index, day_index) == self._today()

    def is_day_enabled(self, week_index: int, day_index: int) -> bool:
        d = self.cell_date(week_index, day_index)
        return d is not None and self._bounds.contains(d)

    def is_month_enabled(self, month: int) -> bool:
        return is_month_selectable(self._locale, self._state.display_year, month, self._bounds)

    def is_year_enabled(self, year: int) -> bool:
        return is_year_selectable(self._locale, year, self._bounds)
