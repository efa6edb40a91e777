# Project: temperature-chart
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for temperature-chart.

Commands:
  temperature-chart chart        — print the temperature series as a bar chart
  temperature-chart history      — print the same series as a dated list
  temperature-chart clear-cache  — drop every cached series
"""

import argparse
import logging
from datetime import timedelta
from pathlib import Path

from temperature_chart.cache import JsonFileStore, SeriesCache
from temperature_chart.chart import chart_title, render_series_chart
from temperature_chart.config import DEFAULT_CONFIG_PATH, load_config, position_from_config
from temperature_chart.dates import DAY_COUNT_OPTIONS, DEFAULT_DAY_COUNT
from temperature_chart.history import render_history_text
from temperature_chart.models import DateRange
from temperature_chart.pipeline import ChartPage, ChartPipeline
from temperature_chart.state import ERROR, UIState, navigation_state


def _build_page(config: dict, use_cache: bool = True) -> ChartPage:
    cache = None
    if use_cache:
        cache = SeriesCache(
            JsonFileStore(config["cache"]["path"]),
            max_age=timedelta(days=config["cache"]["max_age_days"]),
        )
    pipeline = ChartPipeline.from_config(
        config,
        locate=lambda: position_from_config(config),
        cache=cache,
    )
    return ChartPage(pipeline)


def _run(config: dict, args) -> UIState:
    page = _build_page(config, use_cache=not args.no_cache)
    state = page.trigger(args.city or "", args.days, args.start, args.end)
    if state.status == ERROR:
        print(f"[error] {state.error}")
        raise SystemExit(1)
    return state


def cmd_chart(config: dict, args) -> None:
    """Fetch (or reuse) the series and print it as a bar chart."""
    state = _run(config, args)
    title = chart_title(state.city, DateRange(state.start_date, state.end_date))
    if state.from_cache:
        title += " [cached]"
    print()
    print(render_series_chart(state.series, title))


def cmd_history(config: dict, args) -> None:
    """Fetch (or reuse) the series and print it one row per day."""
    state = _run(config, args)
    print()
    print(render_history_text(navigation_state(state)))


def cmd_clear_cache(config: dict, args) -> None:
    """Remove every entry from the series cache file."""
    store = JsonFileStore(config["cache"]["path"])
    count = len(store)
    store.clear()
    print(f"[cache] Removed {count} cached series from {store.path}")


def _add_series_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--city",
        metavar="PLACE",
        default="",
        help='Place name, e.g. "Lagos". Omit to use [location] from the config file.',
    )
    parser.add_argument(
        "--days",
        type=int,
        choices=DAY_COUNT_OPTIONS,
        default=DEFAULT_DAY_COUNT,
        help=f"Number of past days to show. Default: {DEFAULT_DAY_COUNT}.",
    )
    parser.add_argument("--start", metavar="YYYY-MM-DD", default=None, help="Explicit first day (needs --end)")
    parser.add_argument("--end", metavar="YYYY-MM-DD", default=None, help="Explicit last day (needs --start)")
    parser.add_argument("--no-cache", action="store_true", help="Skip the local series cache")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="temperature-chart",
        description="Daily average temperature for a city, from Geoapify and Meteostat",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to config.toml (default: ./config.toml)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log provider calls and cache hits")
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    _add_series_args(subparsers.add_parser("chart", help="Show the temperature chart"))
    _add_series_args(subparsers.add_parser("history", help="Show the temperature readings as a list"))
    subparsers.add_parser("clear-cache", help="Remove all cached series")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    commands = {
        "chart": cmd_chart,
        "history": cmd_history,
        "clear-cache": cmd_clear_cache,
    }
    commands[args.command](config, args)


if __name__ == "__main__":
    main()
