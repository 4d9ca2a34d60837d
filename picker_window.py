"""Date-picker popup (tkinter) driven by a NavigationController."""

from datetime import date
from tkinter import font as tkfont
import tkinter as tk
from typing import Callable

from calendar_logic import DAYS_PER_WEEK
from constraints import Direction
from month_grid import WEEK_COUNT
from navigation import NavigationController, View
from settings import bounds_from_settings, load_settings, locale_from_settings

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WN_FG = "#888888"
OUTSIDE_FG = "#A0A0A0"
DISABLED_FG = "#D0D0D0"

PICKER_COLS = 4


class DatePickerWindow:
    """Popup with a day grid plus a month/year picker panel."""

    def __init__(self, settings: dict | None = None, value: date | None = None,
                 on_select: Callable[[date], None] | None = None) -> None:
        self.settings = settings or load_settings()
        self._on_select_cb = on_select

        self.root = tk.Tk()
        self.root.title("Date Picker")
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        self.controller = NavigationController(
            locale_from_settings(self.settings),
            bounds_from_settings(self.settings),
            value,
            month_picker_overlay=self.settings["month_picker_overlay"],
            on_select=self._on_selected,
        )

        self._day_cells: list[list[tk.Label]] = []
        self._week_nums: list[tk.Label] = []
        self._picker_cells: list[tk.Label] = []
        self._build_shell()
        self._refresh()

        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    # ------------------------------------------------------------------
    # Build shell (once): day panel, picker panel, footer
    # ------------------------------------------------------------------
    def _nav_button(self, parent: tk.Frame, text: str, side: str, command) -> tk.Label:
        btn = tk.Label(parent, text=text, font=self.font_nav, bg=GRID_BG, cursor="hand2")
        btn.pack(side=side, padx=4)
        btn.bind("<Button-1>", lambda _e: self._run(command))
        return btn

    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        # Day panel: ◀ title ▶ + weekday header + 6×7 cells
        self._day_panel = tk.Frame(outer, bg=GRID_BG)
        nav = tk.Frame(self._day_panel, bg=GRID_BG)
        nav.grid(row=0, column=0, columnspan=8, sticky="we")
        self._nav_button(nav, "◀", "left", lambda: self.controller.step_month(Direction.PREVIOUS))
        self._nav_button(nav, "▶", "right", lambda: self.controller.step_month(Direction.NEXT))
        self._day_title = tk.Label(nav, font=self.font_header, bg=HEADER_BG, cursor="hand2")
        self._day_title.pack(side="left", expand=True, fill="x")
        self._day_title.bind("<Button-1>", lambda _e: self._run(self._on_day_title))

        show_wn = self.settings["show_week_numbers"]
        locale = self.controller.locale
        for col, wd in enumerate(self.controller.grid.weekday_order):
            fg = "#CC0000" if wd >= 5 else "#333333"
            tk.Label(
                self._day_panel, text=locale.day_abbr(wd)[:2], font=self.font_bold,
                bg=GRID_BG, fg=fg, width=3,
            ).grid(row=1, column=col + 1)

        for r in range(WEEK_COUNT):
            wn = tk.Label(self._day_panel, font=self.font_wn, bg=GRID_BG, fg=WN_FG, width=3)
            if show_wn:
                wn.grid(row=r + 2, column=0)
            self._week_nums.append(wn)
            row_cells: list[tk.Label] = []
            for c in range(DAYS_PER_WEEK):
                cell = tk.Label(self._day_panel, font=self.font_normal, bg=GRID_BG, width=3)
                cell.grid(row=r + 2, column=c + 1)
                cell.bind("<Button-1>", lambda _e, w=r, d=c: self._run(
                    lambda: self.controller.select_day(w, d)))
                row_cells.append(cell)
            self._day_cells.append(row_cells)

        # Picker panel: ◀ year/range ▶ + 4×3 months or years
        self._picker_panel = tk.Frame(outer, bg=GRID_BG)
        pnav = tk.Frame(self._picker_panel, bg=GRID_BG)
        pnav.grid(row=0, column=0, columnspan=PICKER_COLS, sticky="we")
        self._nav_button(pnav, "◀", "left", lambda: self._step_picker(Direction.PREVIOUS))
        self._nav_button(pnav, "▶", "right", lambda: self._step_picker(Direction.NEXT))
        self._picker_title = tk.Label(pnav, font=self.font_header, bg=HEADER_BG, cursor="hand2")
        self._picker_title.pack(side="left", expand=True, fill="x")
        self._picker_title.bind("<Button-1>", lambda _e: self._run(self.controller.toggle_month_year_view))

        for i in range(12):
            cell = tk.Label(self._picker_panel, font=self.font_normal, bg=GRID_BG, width=5, pady=4)
            cell.grid(row=1 + i // PICKER_COLS, column=i % PICKER_COLS, padx=1, pady=1)
            cell.bind("<Button-1>", lambda _e, idx=i: self._run(lambda: self._pick(idx)))
            self._picker_cells.append(cell)

        # Footer
        self._today_link = tk.Label(
            outer, text="Go to today", font=self.font_bold, bg=GRID_BG, fg=ACCENT, cursor="hand2",
        )
        self._today_link.bind("<Button-1>", lambda _e: self._go_today())

    # ------------------------------------------------------------------
    # Refresh every widget from the controller snapshot
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        ctl = self.controller
        state = ctl.state
        overlay = ctl.month_picker_overlay

        show_days = not overlay or state.active_view is View.DAY_GRID
        show_picker = not overlay or state.active_view is not View.DAY_GRID
        self._day_panel.grid_forget()
        self._picker_panel.grid_forget()
        if show_days:
            self._day_panel.grid(row=0, column=0, sticky="n", padx=4)
        if show_picker:
            self._picker_panel.grid(row=0, column=1 if show_days else 0, sticky="n", padx=4)
        if self.settings["show_go_to_today"]:
            self._today_link.grid(row=1, column=0, columnspan=2, pady=(4, 0))

        self._fill_days()
        self._fill_picker()

        if ctl.is_go_to_today_disabled():
            self._today_link.configure(fg=DISABLED_FG, cursor="")
        else:
            self._today_link.configure(fg=ACCENT, cursor="hand2")

    def _fill_days(self) -> None:
        ctl = self.controller
        grid = ctl.grid
        marker = ctl.selected_marker
        self._day_title.configure(text=grid.title)

        for r, wk in enumerate(ctl.week_numbers()):
            self._week_nums[r].configure(text="" if wk is None else str(wk))

        for r in range(WEEK_COUNT):
            for c in range(DAYS_PER_WEEK):
                cell = grid.cell(r, c)
                label = self._day_cells[r][c]
                if cell.is_empty:
                    label.configure(text="", bg=GRID_BG, cursor="")
                    continue
                bg, fg, font = GRID_BG, "black", self.font_normal
                if not cell.in_month:
                    fg = OUTSIDE_FG
                if not ctl.is_day_enabled(r, c):
                    fg = DISABLED_FG
                if ctl.is_today(r, c):
                    bg, fg, font = ACCENT, "white", self.font_bold
                if marker is not None and (marker.week, marker.weekday) == (r, c):
                    bg = SEL_BG
                    fg = "black"
                label.configure(text=str(cell.day), bg=bg, fg=fg, font=font, cursor="hand2")

    def _fill_picker(self) -> None:
        ctl = self.controller
        state = ctl.state
        locale = ctl.locale
        if state.active_view is View.YEAR_PICKER:
            self._picker_title.configure(text=f"{state.year_range_from} - {state.year_range_to}")
            for cell, year in zip(self._picker_cells, ctl.year_range()):
                bg = SEL_BG if ctl.is_year_selected(year) else GRID_BG
                fg = "black" if ctl.is_year_enabled(year) else DISABLED_FG
                cell.configure(text=str(year), bg=bg, fg=fg)
            return

        self._picker_title.configure(text=str(state.display_year))
        for i, cell in enumerate(self._picker_cells):
            month = i + 1
            bg = GRID_BG
            if self.settings["highlight_current_month"] and ctl.is_current_month(month):
                bg = HEADER_BG
            if self.settings["highlight_selected_month"] and ctl.is_month_selected(month):
                bg = SEL_BG
            fg = "black" if ctl.is_month_enabled(month) else DISABLED_FG
            cell.configure(text=locale.month_name(month)[:3], bg=bg, fg=fg)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def _run(self, action) -> None:
        action()
        if self.controller.is_open:
            self._refresh()

    def _on_day_title(self) -> None:
        if self.controller.month_picker_overlay:
            self.controller.toggle_month_picker()

    def _step_picker(self, direction: Direction) -> None:
        if self.controller.state.active_view is View.YEAR_PICKER:
            self.controller.step_year_range(direction)
        else:
            self.controller.step_year(direction)

    def _pick(self, index: int) -> None:
        if self.controller.state.active_view is View.YEAR_PICKER:
            self.controller.pick_year(self.controller.year_range()[index])
        else:
            self.controller.pick_month(index + 1)

    def _go_today(self) -> None:
        if not self.controller.is_go_to_today_disabled():
            self._run(self.controller.go_to_today)

    def _on_selected(self, value: date) -> None:
        self.root.withdraw()
        if self._on_select_cb is not None:
            self._on_select_cb(value)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.controller.open(self.controller.value)
        self._refresh()
        self.root.deiconify()
        self.root.update_idletasks()
        x = self.root.winfo_pointerx() - self.root.winfo_reqwidth() // 2
        y = self.root.winfo_pointery() - 20
        self.root.geometry(f"+{max(0, x)}+{max(0, y)}")
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.controller.close()
        self.root.withdraw()

    def go_to_today(self) -> None:
        """Tray entry: show the picker recentred on today."""
        if self.root.state() == "withdrawn":
            self.show()
        self._run(self.controller.go_to_today)
