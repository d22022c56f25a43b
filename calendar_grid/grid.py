"""
Calendar grid generation.

Provides CalendarGrid, a fixed six-week window of local-midnight dates that
covers one month of the Gregorian calendar and is read back one 7-day row at
a time. The window always starts on the configured first day of the week and
always spans exactly 42 days, so a month view keeps a constant height.

Dates are naive ``datetime`` values at 00:00, i.e. midnight in the host's
local time zone.

CalendarGrid is not internally synchronized: the row cursor is shared state,
so confine iteration to a single owner.
"""

import calendar
import logging
from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Iterator
from typing import List
from typing import Optional
from typing import Union

from calendar_grid.exceptions import RangeError
from calendar_grid.models import GridSnapshot
from calendar_grid.settings import Settings
from calendar_grid.settings import get_settings

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7
ROWS = 6
# Offset of the grid's last day from its first day
WINDOW_DAYS = ROWS * DAYS_PER_WEEK - 1

Row = List[datetime]
IntLike = Union[int, str]


def _today() -> date:
    """Return the current local date."""
    return date.today()


def _coerce(value: Union[IntLike, float, None], name: str) -> int:
    """Convert ``value`` to int the way a numeric form field would be."""
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        raise RangeError(f"{name} must be an integer, got {value!r}", value) from None


def weekday_index(day: datetime) -> int:
    """Return the day-of-week index of ``day`` with 0 = Sunday."""
    return day.isoweekday() % DAYS_PER_WEEK


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    return calendar.monthrange(year, month)[1]


class CalendarGrid:
    """
    A 6x7 grid of days surrounding a month.

    The grid starts at the latest occurrence of ``first_day_of_week`` on or
    before the 1st of the month and ends 41 days later. Rows are fetched
    with :meth:`fetch_row` (or by iterating the grid), which advances an
    internal cursor; once all six rows have been read the grid is exhausted
    until :meth:`reset` is called or the first day of the week is changed.

    Example:
        grid = CalendarGrid(6, 2015)
        for row in grid:
            print([day.day for day in row])
    """

    def __init__(
        self,
        month: Optional[IntLike] = None,
        year: Optional[IntLike] = None,
        first_day_of_week: Optional[IntLike] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Validate the inputs and derive the grid.

        Args:
            month: Month of the calendar (1-12), defaults to the current month
            year: Year of the calendar, defaults to the current year
            first_day_of_week: Weekday each row starts on (0 = Sunday),
                defaults to the configured first day of the week
            settings: Optional settings overriding the global instance

        Raises:
            RangeError: If any of the values is out of bounds
        """
        self.settings = settings or get_settings()
        today = _today()

        if month is not None:
            month = _coerce(month, "month")
            if month < 1 or month > 12:
                raise RangeError("month must be between 1-12", month)
        else:
            month = today.month

        if year is not None:
            year = _coerce(year, "year")
            if year < self.settings.min_year or year > self.settings.max_year:
                raise RangeError(
                    f"year must be between {self.settings.min_year}-{self.settings.max_year}",
                    year,
                )
        else:
            year = today.year

        if first_day_of_week is None:
            first_day_of_week = self.settings.first_day_of_week

        self._month: int = month
        self._year: int = year
        self._first_day_of_week: int = 0
        self._first_day_of_month = datetime(year, month, 1)
        self._first_day = self._first_day_of_month
        self._last_day = self._first_day_of_month
        self._cursor = self._first_day_of_month

        self.first_day_of_week = first_day_of_week

    def __repr__(self) -> str:
        return (
            f"CalendarGrid(month={self._month}, year={self._year}, "
            f"first_day_of_week={self._first_day_of_week})"
        )

    def __iter__(self) -> Iterator[Row]:
        """Yield the remaining rows, advancing the shared cursor."""
        while True:
            row = self.fetch_row()
            if row is None:
                return
            yield row

    @property
    def month(self) -> int:
        """Month of the calendar."""
        return self._month

    @property
    def year(self) -> int:
        """Year of the calendar."""
        return self._year

    @property
    def first_day_of_week(self) -> int:
        """First day of the week of the calendar (0 = Sunday)."""
        return self._first_day_of_week

    @first_day_of_week.setter
    def first_day_of_week(self, value: IntLike) -> None:
        """Set the first day of the week and recompute the whole grid.

        Nothing is changed when the value is rejected.
        """
        first_day_of_week = _coerce(value, "first day of week")
        if first_day_of_week < 0 or first_day_of_week > 6:
            raise RangeError("first day of week must be between 0-6", first_day_of_week)

        self._recompute(first_day_of_week)

    def _recompute(self, first_day_of_week: int) -> None:
        first_of_month = datetime(self._year, self._month, 1)
        first_sunday = first_of_month - timedelta(days=weekday_index(first_of_month))

        first_day = first_sunday + timedelta(days=first_day_of_week)
        if first_day > first_of_month:
            first_day -= timedelta(days=DAYS_PER_WEEK)

        self._first_day_of_week = first_day_of_week
        self._first_day_of_month = first_of_month
        self._first_day = first_day
        self._last_day = first_day + timedelta(days=WINDOW_DAYS)
        self._cursor = first_day

        logger.debug(
            f"Grid {self._year}-{self._month:02d} (first day of week {first_day_of_week}): "
            f"{self._first_day.date()} .. {self._last_day.date()}"
        )

    def fetch_row(self) -> Optional[Row]:
        """
        Fetch the next row of the grid and move the cursor past it.

        Returns:
            A list of seven consecutive local-midnight dates, or None if
            there are no more rows
        """
        if self._cursor > self._last_day:
            return None

        row = []
        for _ in range(DAYS_PER_WEEK):
            row.append(self._cursor)
            self._cursor += timedelta(days=1)

        return row

    def reset(self) -> None:
        """Rewind the row cursor to the first day of the grid."""
        self._cursor = self._first_day

    def rows(self) -> List[Row]:
        """Return all six rows without touching the row cursor."""
        return [
            [
                self._first_day + timedelta(days=week * DAYS_PER_WEEK + offset)
                for offset in range(DAYS_PER_WEEK)
            ]
            for week in range(ROWS)
        ]

    @property
    def first_day(self) -> datetime:
        """First day shown by the grid."""
        return self._first_day

    @property
    def last_day(self) -> datetime:
        """Last day shown by the grid."""
        return self._last_day

    @property
    def first_day_of_month(self) -> datetime:
        return self._first_day_of_month

    @property
    def last_day_of_month(self) -> datetime:
        return datetime(self._year, self._month, days_in_month(self._year, self._month))

    @property
    def first_day_of_previous_month(self) -> datetime:
        previous = self.last_day_of_previous_month
        return datetime(previous.year, previous.month, 1)

    @property
    def last_day_of_previous_month(self) -> datetime:
        return self._first_day_of_month - timedelta(days=1)

    @property
    def first_day_of_next_month(self) -> datetime:
        """First day of the month the grid's last day falls in."""
        return datetime(self._last_day.year, self._last_day.month, 1)

    @property
    def last_day_of_next_month(self) -> datetime:
        """Last day of the month the grid's last day falls in."""
        year, month = self._last_day.year, self._last_day.month
        return datetime(year, month, days_in_month(year, month))

    def contains(self, day: datetime) -> bool:
        """Check whether ``day`` belongs to the grid's month."""
        return day.year == self._year and day.month == self._month

    def previous_month(self) -> "CalendarGrid":
        """Build the grid for the previous month with the same first day of week."""
        previous = self.first_day_of_previous_month
        return CalendarGrid(previous.month, previous.year, self._first_day_of_week, self.settings)

    def next_month(self) -> "CalendarGrid":
        """Build the grid for the next month with the same first day of week."""
        following = self.first_day_of_next_month
        return CalendarGrid(following.month, following.year, self._first_day_of_week, self.settings)

    def snapshot(self) -> GridSnapshot:
        """Export the grid boundaries and rows as a serializable model."""
        return GridSnapshot(
            month=self._month,
            year=self._year,
            first_day_of_week=self._first_day_of_week,
            first_day=self._first_day,
            last_day=self._last_day,
            first_day_of_month=self.first_day_of_month,
            last_day_of_month=self.last_day_of_month,
            first_day_of_previous_month=self.first_day_of_previous_month,
            last_day_of_previous_month=self.last_day_of_previous_month,
            first_day_of_next_month=self.first_day_of_next_month,
            last_day_of_next_month=self.last_day_of_next_month,
            rows=self.rows(),
        )
