from __future__ import annotations
import calendar
import datetime
import math
from dataclasses import dataclass

from .core import DomainError

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class CalendarGrid:
    """Month grid with weeks starting on Sunday (column 0)."""

    first_weekday_offset: int
    total_days: int
    row_count: int


def compute_calendar_metrics(month: datetime.date) -> CalendarGrid:
    """Grid layout for the month containing `month`; the day itself is ignored."""
    weekday, total_days = calendar.monthrange(month.year, month.month)
    # monthrange counts from Monday = 0
    offset = (weekday + 1) % DAYS_PER_WEEK
    rows = math.ceil((offset + total_days) / DAYS_PER_WEEK)
    return CalendarGrid(offset, total_days, rows)


def calendar_cell(day: int, grid: CalendarGrid) -> tuple[int, int]:
    """Returns the (row, column) of a day of the month."""
    if not 1 <= day <= grid.total_days:
        raise DomainError(f"Day {day} is outside 1..{grid.total_days}")

    index = grid.first_weekday_offset + day - 1
    return divmod(index, DAYS_PER_WEEK)
