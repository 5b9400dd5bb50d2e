from PIL import Image, ImageDraw, ImageFont

from edutrack.constants import (
    CHART_WIDTH,
    CHART_HEIGHT,
    TREND_MAX_DAYS,
    COLOR_TEXT,
    COLOR_MUTED,
    COLOR_PANEL,
)
from edutrack.reports import performance_color

MARGIN = 24
LABEL_HEIGHT = 16


def render_trend_chart(trend, width=CHART_WIDTH, height=CHART_HEIGHT):
    """Draw the daily attendance rate as one bar per day, newest on the right."""
    image = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    if not trend:
        draw.text((MARGIN, height // 2 - LABEL_HEIGHT // 2),
                  "No attendance data yet", fill=COLOR_MUTED, font=font)
        return image

    days = trend[-TREND_MAX_DAYS:]
    plot_top = MARGIN
    plot_bottom = height - MARGIN - LABEL_HEIGHT
    plot_height = max(plot_bottom - plot_top, 1)
    slot = (width - 2 * MARGIN) / len(days)
    bar_width = max(int(slot * 0.6), 2)

    draw.line((MARGIN, plot_bottom, width - MARGIN, plot_bottom), fill=COLOR_TEXT)
    draw.line((MARGIN, plot_top, width - MARGIN, plot_top), fill=COLOR_PANEL)

    for idx, day in enumerate(days):
        x0 = int(MARGIN + idx * slot + (slot - bar_width) / 2)
        x1 = x0 + bar_width
        bar_top = plot_bottom - int(plot_height * day.rate / 100)
        if bar_top < plot_bottom:
            draw.rectangle((x0, bar_top, x1, plot_bottom), fill=performance_color(day.rate))
        draw.text((x0, max(bar_top - LABEL_HEIGHT, 0)), f"{day.rate}%", fill=COLOR_TEXT, font=font)

        if len(days) <= 15 or idx % 5 == 0:
            draw.text((x0, plot_bottom + 4), day.date[5:], fill=COLOR_MUTED, font=font)

    return image
