from edutrack.charts import render_trend_chart
from edutrack.constants import COLOR_SUCCESS, COLOR_DANGER, TREND_MAX_DAYS
from edutrack.models import DaySummary


def _rgb(color):
    return tuple(int(color[i:i + 2], 16) for i in (1, 3, 5))


def test_empty_trend_renders_placeholder():
    image = render_trend_chart([], width=300, height=120)

    assert image.size == (300, 120)
    assert image.getpixel((0, 0)) == (255, 255, 255)


def test_bars_use_tier_colours():
    trend = [
        DaySummary(date="2026-01-05", present=10, absent=0, rate=100),
        DaySummary(date="2026-01-06", present=1, absent=9, rate=10),
    ]

    image = render_trend_chart(trend, width=200, height=140)
    colours = {colour for _, colour in image.getcolors(maxcolors=200 * 140)}

    assert _rgb(COLOR_SUCCESS) in colours
    assert _rgb(COLOR_DANGER) in colours


def test_zero_rate_draws_no_bar():
    trend = [DaySummary(date="2026-01-05", present=0, absent=4, rate=0)]

    image = render_trend_chart(trend, width=200, height=140)
    colours = {colour for _, colour in image.getcolors(maxcolors=200 * 140)}

    assert _rgb(COLOR_DANGER) not in colours


def test_only_recent_days_are_drawn():
    older = [DaySummary(date=f"2026-01-{day:02d}", present=0, absent=1, rate=10) for day in range(1, 27)]
    recent = [DaySummary(date=f"2026-02-{day:02d}", present=1, absent=0, rate=100) for day in range(1, 29)]
    recent += [DaySummary(date=f"2026-03-{day:02d}", present=1, absent=0, rate=100) for day in range(1, 3)]
    assert len(recent) == TREND_MAX_DAYS

    image = render_trend_chart(older + recent, width=400, height=140)
    colours = {colour for _, colour in image.getcolors(maxcolors=400 * 140)}

    assert _rgb(COLOR_SUCCESS) in colours
    assert _rgb(COLOR_DANGER) not in colours
