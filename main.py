"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import sys
import threading
from datetime import date

from loguru import logger

from calendar_logic import week_of_year
from icon_gen import create_icon_image
from picker_window import DatePickerWindow
from settings import load_settings, locale_from_settings
from tray_icon import create_tray


def main() -> None:
    settings = load_settings()
    logger.remove()
    logger.add(sys.stderr, level=settings["log_level"])

    locale = locale_from_settings(settings)
    picker = DatePickerWindow(
        settings, on_select=lambda d: logger.info(f"Picked {d.isoformat()}"),
    )

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        picker.root.after(0, picker.toggle)

    def on_today() -> None:
        picker.root.after(0, picker.go_to_today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            picker.root.destroy()
        picker.root.after(0, _quit)

    today = date.today()
    week = week_of_year(locale, *locale.from_date(today))
    tray = create_tray(create_icon_image(locale, today), f"Date Picker – Week {week}",
                       on_show, on_exit, on_today=on_today)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    picker.root.mainloop()


if __name__ == "__main__":
    main()
