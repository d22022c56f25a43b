"""
Gregorian calendar grid generator.

Builds the fixed six-week window of days that a month view displays,
aligned to a configurable first day of the week, and exposes it one
7-day row at a time together with the previous/next month boundaries
needed for paging between months.

Main Components:
- Grid: CalendarGrid, the 6x7 window and its row cursor
- Models: GridSnapshot, a serializable copy of a grid
- Settings: environment-driven defaults and logging setup
- Plural: Russian day-count formatting ("21 день", "5 дней")

Usage:
    # Print a month from the command line
    python -m calendar_grid --month 6 --year 2015

    # Iterate a grid programmatically
    from calendar_grid import CalendarGrid

    grid = CalendarGrid(6, 2015, first_day_of_week=1)
    while (row := grid.fetch_row()) is not None:
        print([day.day for day in row])
"""

__version__ = "1.0.0"
__license__ = "BSD-3-Clause"

# Public API for external usage
from calendar_grid.exceptions import CalendarError
from calendar_grid.exceptions import RangeError
from calendar_grid.grid import CalendarGrid
from calendar_grid.models import GridSnapshot
from calendar_grid.plural import format_days
from calendar_grid.settings import Settings
from calendar_grid.settings import get_settings

__all__ = [
    "CalendarError",
    "CalendarGrid",
    "GridSnapshot",
    "RangeError",
    "Settings",
    "format_days",
    "get_settings",
]
