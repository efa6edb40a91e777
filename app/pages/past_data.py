# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
past_data.py — Streamlit History Page: the Chart Page's series as a list.

Reached from the "View Past Data" button on app.py, which stores
{labels, values} in st.session_state.past_data. Opening this page directly
shows the "no data" message.
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

import streamlit as st

from temperature_chart.history import render_history_html


st.set_page_config(
    page_title="Past Temperature Data",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Same dark theme as app.py
st.markdown(
    """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 720px; }
  .tc-table { width: 100%; border-collapse: collapse; font-size: 0.95rem; }
  .tc-table th {
    font-size: 0.65rem; text-transform: uppercase; letter-spacing: 0.1em;
    color: #636366; font-weight: 600; padding: 8px 12px; text-align: right;
    border-bottom: 1px solid #2c2c2e;
  }
  .tc-table th:first-child, .tc-table td:first-child { text-align: left; }
  .tc-table td {
    padding: 12px; color: #f5f5f7; text-align: right;
    border-bottom: 1px solid #1c1c1e; font-variant-numeric: tabular-nums;
  }
  .condition-line { color: #8e8e93; font-size: 0.95rem; margin-top: 2rem; text-align: center; }
</style>
""",
    unsafe_allow_html=True,
)

st.markdown(
    '<h1 style="text-align:center;font-size:2rem;font-weight:700;">Past Temperature Data</h1>',
    unsafe_allow_html=True,
)

st.markdown(render_history_html(st.session_state.get("past_data")), unsafe_allow_html=True)

if st.button("← Back to chart"):
    st.switch_page("app.py")
