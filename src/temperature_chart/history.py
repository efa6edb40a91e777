# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — The "past data" view: a series handed over by the Chart Page,
shown as one row per day. No fetching happens here.
"""

import html

from temperature_chart.errors import InvalidInput
from temperature_chart.models import TemperatureSeries
from temperature_chart.utils import fmt_day

NO_DATA_MESSAGE = "No data available"
MISSING_READING = "—"


def history_rows(nav_state: dict | None) -> list[tuple[str, float | None]]:
    """Return (date, temperature) rows from the navigation payload.

    Absent or malformed state counts as an empty {labels: [], values: []}.
    """
    if not nav_state:
        return []
    try:
        series = TemperatureSeries.from_dict(nav_state)
    except (InvalidInput, TypeError, ValueError):
        return []
    return list(series.rows())


def format_temperature(value: float | None) -> str:
    if value is None:
        return MISSING_READING
    return f"{value:.1f}°C"


def format_row(label: str, value: float | None) -> str:
    return f"Date: {label} - Temperature: {format_temperature(value)}"


def _weekday(label: str) -> str:
    try:
        return fmt_day(label)
    except ValueError:
        return ""


def render_history_text(nav_state: dict | None, title: str = "Past Temperature Data") -> str:
    """Render the history list as plain text for the terminal."""
    rows = history_rows(nav_state)
    lines = [title, "─" * len(title)]
    if not rows:
        lines.append(NO_DATA_MESSAGE)
    else:
        lines.extend(format_row(label, value) for label, value in rows)
    return "\n".join(lines)


def render_history_html(nav_state: dict | None) -> str:
    """Render the history list as an HTML table for the Streamlit page.

    Every cell is HTML-escaped; labels come from session state, not from us.
    """
    rows = history_rows(nav_state)
    if not rows:
        return f'<div class="condition-line">{NO_DATA_MESSAGE}</div>'

    parts = [
        '<table class="tc-table">',
        "<thead><tr><th>Date</th><th>Day</th><th>Temperature</th></tr></thead>",
        "<tbody>",
    ]
    for label, value in rows:
        parts.append(
            f"<tr><td>{html.escape(label)}</td><td>{html.escape(_weekday(label))}</td>"
            f"<td>{html.escape(format_temperature(value))}</td></tr>"
        )
    parts.append("</tbody></table>")
    return "".join(parts)
