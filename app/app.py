# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit Chart Page: daily average temperature for a city.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"

Leave the city blank to use the browser's location.
"View past data" hands the current series to pages/past_data.py through
st.session_state.
"""

import sys
from datetime import date, timedelta
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import streamlit as st
from streamlit_js_eval import get_geolocation

from temperature_chart.cache import JsonFileStore, SeriesCache
from temperature_chart.chart import build_figure, error_card_html
from temperature_chart.config import load_config
from temperature_chart.dates import DAY_COUNT_OPTIONS, DEFAULT_DAY_COUNT
from temperature_chart.models import DateRange
from temperature_chart.pipeline import ChartPage, ChartPipeline
from temperature_chart.state import ERROR, LOADING, SUCCESS, UIState, navigation_state


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Temperature Data",
    page_icon="🌡",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 960px; }

  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "SF Pro Display",
                 "SF Pro Text", "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }

  .stTextInput > div > div > input {
    background: #1c1c1e !important;
    border: 1px solid #3a3a3c !important;
    border-radius: 980px !important;
    color: #f5f5f7 !important;
    font-size: 1.1rem !important;
    padding: 0.75rem 1.25rem !important;
    text-align: center;
  }
  .stTextInput > div > div > input::placeholder { color: #636366 !important; }

  .stButton > button {
    background: #0a84ff !important;
    color: #ffffff !important;
    border: none !important;
    border-radius: 980px !important;
    font-weight: 600 !important;
  }

  .error-card {
    background: rgba(255, 69, 58, 0.1);
    border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px;
    color: #ff453a;
    font-size: 1rem;
    padding: 20px 24px;
    text-align: center;
    margin: 1rem 0;
  }

  .condition-line {
    color: #8e8e93;
    font-size: 0.95rem;
    margin-top: 1rem;
    text-align: center;
  }

  .tc-footer {
    text-align: center;
    color: #48484a;
    font-size: 0.8rem;
    padding: 3rem 0 1rem;
  }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Config + cache (shared across reruns and sessions)
# ─────────────────────────────────────────────────────────────

try:
    CONFIG = load_config()
except (FileNotFoundError, ValueError) as e:
    st.markdown(error_card_html(e), unsafe_allow_html=True)
    st.stop()


@st.cache_resource
def get_series_cache(path: str, max_age_days: int) -> SeriesCache:
    """One SeriesCache per cache file for the whole server process."""
    return SeriesCache(JsonFileStore(path), max_age=timedelta(days=max_age_days))


SERIES_CACHE = get_series_cache(CONFIG["cache"]["path"], CONFIG["cache"]["max_age_days"])


# ─────────────────────────────────────────────────────────────
# Session state initialisation
# ─────────────────────────────────────────────────────────────

if "chart_state" not in st.session_state:
    st.session_state.chart_state = UIState()
if "last_inputs" not in st.session_state:
    st.session_state.last_inputs = None   # inputs of the last trigger


# ─────────────────────────────────────────────────────────────
# SECTION 1: Inputs
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<h1 style="text-align:center;font-size:2rem;font-weight:700;">Temperature Data</h1>',
    unsafe_allow_html=True,
)

col_l, col_c, col_r = st.columns([1, 2, 1])
with col_c:
    city_input = st.text_input(
        label="city",
        placeholder="Enter a city (leave blank to use your location)",
        label_visibility="collapsed",
        key="city_input",
    )
    day_count = st.radio(
        label="Days",
        options=list(DAY_COUNT_OPTIONS),
        index=list(DAY_COUNT_OPTIONS).index(DEFAULT_DAY_COUNT),
        format_func=lambda n: f"{n} days",
        horizontal=True,
        label_visibility="collapsed",
        key="day_count_input",
    )
    with st.expander("Custom date range"):
        use_custom = st.checkbox("Use explicit start and end dates", key="use_custom_range")
        today = date.today()
        start_col, end_col = st.columns(2)
        with start_col:
            start_input = st.date_input(
                "Start Date",
                value=today - timedelta(days=day_count),
                max_value=today,
                key="custom_start_date",
            )
        with end_col:
            end_input = st.date_input("End Date", value=today, max_value=today, key="custom_end_date")
    refresh = st.button("Get Temperature Data", use_container_width=True)

city = city_input.strip()
start = start_input if use_custom else None
end = end_input if use_custom else None

# Blank city: ask the browser. Returns None until the user answers the prompt.
geo_payload = get_geolocation() if not city else None


# ─────────────────────────────────────────────────────────────
# SECTION 2: Trigger the pipeline
# ─────────────────────────────────────────────────────────────

inputs = (city, day_count, start, end)
waiting_for_position = not city and geo_payload is None
should_trigger = refresh or (inputs != st.session_state.last_inputs and not waiting_for_position)

if should_trigger:
    pipeline = ChartPipeline.from_config(CONFIG, locate=lambda: geo_payload, cache=SERIES_CACHE)
    page = ChartPage(pipeline, st.session_state.chart_state)
    token = page.begin(city, day_count, start, end)
    st.session_state.chart_state = page.state
    st.session_state.last_inputs = inputs
    with st.spinner("Loading…"):
        st.session_state.chart_state = page.complete(token, city, day_count, start, end)

state: UIState = st.session_state.chart_state


# ─────────────────────────────────────────────────────────────
# SECTION 3: Loading / error / chart
# ─────────────────────────────────────────────────────────────

if waiting_for_position and state.status not in (SUCCESS, ERROR):
    st.markdown(
        '<div class="condition-line">Waiting for your browser location… '
        "or enter a city above.</div>",
        unsafe_allow_html=True,
    )
elif state.status == LOADING:
    st.markdown('<div class="condition-line">Loading...</div>', unsafe_allow_html=True)
elif state.status == ERROR:
    st.markdown(error_card_html(state.error), unsafe_allow_html=True)
elif state.status == SUCCESS and state.series is not None and not state.series.is_empty:
    date_range = DateRange(state.start_date, state.end_date)
    fig = build_figure(state.series, state.city, date_range)

    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})

    if state.from_cache:
        st.caption("Served from the local cache.")

    if st.button("View Past Data"):
        st.session_state.past_data = navigation_state(state)
        st.switch_page("pages/past_data.py")
else:
    st.markdown(
        '<div class="condition-line">No data available. Please enter a city.</div>',
        unsafe_allow_html=True,
    )


# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="tc-footer">'
    'Geocoding by <a href="https://www.geoapify.com" style="color:#0a84ff;text-decoration:none;">Geoapify</a>'
    ' &nbsp;·&nbsp; Daily data by <a href="https://meteostat.net" style="color:#0a84ff;text-decoration:none;">Meteostat</a>'
    '</div>',
    unsafe_allow_html=True,
)
