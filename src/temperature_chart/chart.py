# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — Chart rendering for a TemperatureSeries.

build_figure() returns a plotly line chart for the Streamlit page.
error_card_html() returns the escaped error banner shown in its place.
render_series_chart() returns an ASCII bar chart for the terminal.
"""

import html
import os

import plotly.graph_objects as go

from temperature_chart.models import DateRange, TemperatureSeries
from temperature_chart.utils import fmt_day

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar

LINE_COLOR = "rgba(75, 192, 192, 1)"
FILL_COLOR = "rgba(75, 192, 192, 0.2)"

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'SF Pro Display', sans-serif",
              color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=48, b=8),
    showlegend=False,
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366")),
)


def chart_title(city: str, date_range: DateRange) -> str:
    """Title like 'Temperature Data for Lagos (2024-01-01 to 2024-01-08)'."""
    place = city.strip() if city and city.strip() else "your location"
    start, end = date_range.to_iso()
    return f"Temperature Data for {place} ({start} to {end})"


def error_card_html(message: object) -> str:
    """Error banner markup. Messages can echo user or provider text, so escape them."""
    return f'<div class="error-card">⚠️ {html.escape(str(message))}</div>'


def build_figure(series: TemperatureSeries, city: str, date_range: DateRange) -> go.Figure:
    """Build a line chart of daily average temperature.

    Missing readings stay None and show as gaps in the line.
    """
    place = city.strip() if city and city.strip() else "your location"
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=list(series.labels),
        y=list(series.values),
        name=f"Temperature in {place}",
        mode="lines+markers",
        line=dict(color=LINE_COLOR, width=2, shape="spline", smoothing=0.3),
        marker=dict(color=LINE_COLOR, size=5),
        fill="tozeroy",
        fillcolor=FILL_COLOR,
        connectgaps=False,
    ))
    fig.update_layout(**{
        **PLOTLY_LAYOUT,
        "title": dict(text=chart_title(city, date_range), font=dict(color="#f5f5f7", size=20)),
        "xaxis": dict(**PLOTLY_LAYOUT["xaxis"], title=dict(text="Date", font=dict(size=16))),
        "yaxis": dict(
            **PLOTLY_LAYOUT["yaxis"],
            title=dict(text="Temperature (°C)", font=dict(size=16)),
            ticksuffix="°",
        ),
        "height": 420,
    })
    return fig


# ─────────────────────────────────────────────────────────────
# Terminal rendering
# ─────────────────────────────────────────────────────────────

def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def _terminal_bar_width() -> int:
    try:
        terminal_width = os.get_terminal_size().columns
    except OSError:
        terminal_width = FALLBACK_TERMINAL_WIDTH
    return max(10, terminal_width - BAR_LABEL_RESERVE)


def render_series_chart(
    series: TemperatureSeries,
    title: str,
    bar_width: int | None = None,
) -> str:
    """Render a temperature series as a labelled horizontal bar chart.

    Values are shifted so the coldest reading maps to an empty bar; the
    printed number is always the real temperature.

    Args:
        series: Series to draw.
        title: Chart title printed above the bars.
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.

    Returns:
        Multi-line string containing the chart.
    """
    if series.is_empty:
        return f"{title}\n  No data available"

    if bar_width is None:
        bar_width = _terminal_bar_width()

    labels = [fmt_day(label) for label in series.labels]
    present = [v for v in series.values if v is not None]
    # Shift so negative temperatures still get proportional bars
    floor = min(present) if present else 0.0
    offset = -floor if floor < 0 else 0.0
    max_shifted = max((v + offset for v in present), default=1.0) or 1.0

    label_w = max(len(lbl) for lbl in labels)
    lines = [title]
    for label, value in zip(labels, series.values):
        if value is None:
            lines.append(f"  {label:<{label_w}} │{' ' * bar_width}│ {'n/a':>7}")
            continue
        bar = _bar(value + offset, max_shifted, bar_width)
        lines.append(f"  {label:<{label_w}} │{bar}│ {value:>5.1f}°C")

    return "\n".join(lines)
