"""
Data models for the calendar grid library.

Defines Pydantic models used to serialize a calendar grid, with validation
of the fixed 6x7 shape and the month/weekday ranges.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator


class GridSnapshot(BaseModel):
    """
    A frozen view of a calendar grid and all of its boundary dates.

    Produced by CalendarGrid.snapshot() for JSON export and for callers that
    want a plain value instead of the stateful row iterator.
    """

    month: int = Field(
        ...,
        ge=1,
        le=12,
        description="Month of the calendar"
    )

    year: int = Field(
        ...,
        description="Year of the calendar"
    )

    first_day_of_week: int = Field(
        ...,
        ge=0,
        le=6,
        description="Weekday each row starts on (0 = Sunday)"
    )

    first_day: datetime = Field(..., description="First day shown by the grid")
    last_day: datetime = Field(..., description="Last day shown by the grid")

    first_day_of_month: datetime = Field(..., description="Midnight of the 1st of the month")
    last_day_of_month: datetime = Field(..., description="Midnight of the last day of the month")

    first_day_of_previous_month: datetime = Field(
        ...,
        description="Midnight of the 1st of the preceding month"
    )

    last_day_of_previous_month: datetime = Field(
        ...,
        description="The day before the first day of the month"
    )

    first_day_of_next_month: datetime = Field(
        ...,
        description="Midnight of the 1st of the month containing the grid's last day"
    )

    last_day_of_next_month: datetime = Field(
        ...,
        description="Midnight of the last day of the month containing the grid's last day"
    )

    rows: List[List[datetime]] = Field(
        ...,
        description="Six rows of seven local-midnight dates"
    )

    @field_validator("rows")
    @classmethod
    def validate_rows(cls, v: List[List[datetime]]) -> List[List[datetime]]:
        """Ensure the grid has the fixed 6x7 shape."""
        if len(v) != 6 or any(len(row) != 7 for row in v):
            raise ValueError("rows must be a 6x7 grid of dates")
        return v

    @property
    def days_in_month(self) -> int:
        """Number of days in the calendar's month."""
        return self.last_day_of_month.day

    def is_in_month(self, day: datetime) -> bool:
        """Check whether a grid day belongs to the calendar's month."""
        return day.year == self.year and day.month == self.month

    def model_dump_days(self) -> List[List[int]]:
        """Export the rows as day-of-month numbers for compact rendering."""
        return [[day.day for day in row] for row in self.rows]
