"""
Command-line entry point: render a calendar grid as text or JSON.

Usage:
    python -m calendar_grid --month 6 --year 2015 --first-day-of-week 1
    python -m calendar_grid --json
"""

import argparse
import sys
from typing import List
from typing import Optional

import structlog

from calendar_grid.exceptions import RangeError
from calendar_grid.grid import CalendarGrid
from calendar_grid.plural import format_days
from calendar_grid.settings import Settings
from calendar_grid.settings import get_settings

logger = structlog.get_logger("calendar_grid.cli")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the calendar grid CLI."""
    parser = argparse.ArgumentParser(
        prog="calendar_grid",
        description="Print a six-week calendar grid for a month.",
    )
    parser.add_argument("--month", "-m", help="month 1-12 (default: current month)")
    parser.add_argument("--year", "-y", help="year (default: current year)")
    parser.add_argument(
        "--first-day-of-week",
        "-f",
        dest="first_day_of_week",
        help="weekday each row starts on, 0 = Sunday (default: from settings)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the grid snapshot as JSON",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="override CALENDAR_GRID_LOG_LEVEL",
    )
    return parser


def render_text(grid: CalendarGrid) -> str:
    """Render the grid as a header line plus six lines of day numbers.

    Days outside the grid's month are shown in brackets.
    """
    snapshot = grid.snapshot()
    lines = [f"{grid.year:04d}-{grid.month:02d} ({format_days(snapshot.days_in_month)})"]
    for row in snapshot.rows:
        cells = []
        for day in row:
            label = str(day.day) if snapshot.is_in_month(day) else f"[{day.day}]"
            cells.append(f"{label:>4}")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings: Settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    settings.setup_logging()

    try:
        grid = CalendarGrid(args.month, args.year, args.first_day_of_week, settings=settings)
    except RangeError as e:
        logger.warning("grid_rejected", reason=e.message, value=repr(e.value))
        print(f"calendar_grid: error: {e.message}", file=sys.stderr)
        return 2

    logger.debug(
        "grid_rendered",
        month=grid.month,
        year=grid.year,
        first_day_of_week=grid.first_day_of_week,
        output="json" if args.json else "text",
    )

    if args.json:
        print(grid.snapshot().model_dump_json(indent=2))
    else:
        print(render_text(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
