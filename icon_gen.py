"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

from calendar_logic import LocaleCalendar, week_of_year


def create_icon_image(locale: LocaleCalendar, today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: today's locale week number, black on white."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    today = today or date.today()
    week = str(week_of_year(locale, *locale.from_date(today)))

    # Find the largest font size that fits the icon
    font_size = 120
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), week, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= size:
            break
        font_size -= 1

    # Centre the visible pixels (font metrics carry an offset)
    bbox = draw.textbbox((0, 0), week, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), week, fill="black", font=font)

    return img
