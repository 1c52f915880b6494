"""
Month grid calculator.

A month is laid out as full weeks of 7 columns. Cells before the 1st are
filled from the previous month, cells after the last day from the next month,
giving 35 (5 rows) or 42 (6 rows) cells.
"""

import calendar
import datetime
import logging
from typing import Dict, List

from .dates import DAY_NAMES, MONTH_NAMES, normalize_month, sunday_weekday, week_number
from .exceptions import PlannerError
from .models import CalendarCell, CalendarMonth

logger = logging.getLogger(__name__)

FULL_GRID_CELLS = 42
COMPACT_GRID_CELLS = 35


def compute_month_grid(year: int, month: int, week_start: int = 0) -> CalendarMonth:
    """
    Computes the grid shape for a month.

    Args:
        year: Any year ``datetime.date`` supports.
        month: 0-based month. Out-of-range values roll over into the
            neighbouring years (12 is January of ``year + 1``).
        week_start: Column 0 weekday, 0 = Sunday .. 6 = Saturday.
    """
    if not 0 <= month <= 11:
        logger.debug("Normalising month index %d of %d", month, year)
    year, month = normalize_month(year, month)
    first = datetime.date(year, month + 1, 1)
    first_weekday = sunday_weekday(first)
    days = calendar.monthrange(year, month + 1)[1]

    leading = (first_weekday - week_start) % 7
    used = leading + days
    # Only drop to 5 rows when a 6th row would hold more than a week of padding
    total = COMPACT_GRID_CELLS if FULL_GRID_CELLS - used > 7 else FULL_GRID_CELLS

    return CalendarMonth(
        year=year,
        month=month,
        week_start=week_start,
        first_weekday=first_weekday,
        days_in_month=days,
        leading_days=leading,
        trailing_days=total - used,
        rows=total // 7,
    )


def enumerate_cells(grid: CalendarMonth) -> List[CalendarCell]:
    """
    All cells of the grid in row-major order.

    Raises PlannerError when the padding days fall outside the range
    ``datetime.date`` supports (January of year 1, December of year 9999).
    """
    try:
        start = grid.first_day - datetime.timedelta(days=grid.leading_days)
        start + datetime.timedelta(days=grid.total_cells - 1)
    except OverflowError as e:
        raise PlannerError(
            f"{MONTH_NAMES[grid.month]} {grid.year} grid runs outside the supported date range"
        ) from e

    cells = []
    for i in range(grid.total_cells):
        day = start + datetime.timedelta(days=i)
        cells.append(CalendarCell(
            date=day,
            row=i // 7,
            column=i % 7,
            is_current_month=(day.month == grid.month + 1),
        ))
    return cells


def month_dates(year: int, month: int, week_start: int = 0) -> Dict[str, List[datetime.date]]:
    """Grid dates split into ``previous``, ``current`` and ``next`` month lists."""
    grid = compute_month_grid(year, month, week_start)
    dates = [cell.date for cell in enumerate_cells(grid)]
    current_end = grid.leading_days + grid.days_in_month
    return {
        "previous": dates[:grid.leading_days],
        "current": dates[grid.leading_days:current_end],
        "next": dates[current_end:],
    }


def highlight_week_cells(cells: List[CalendarCell], week: int) -> List[CalendarCell]:
    """Cells whose ISO week is ``week``, used to mark the current week on mini calendars."""
    return [cell for cell in cells if week_number(cell.date) == week]


def weekday_headers(week_start: int = 0, style: str = "full") -> List[str]:
    """Column labels: ``full`` (Sunday), ``short`` (Sun) or ``letter`` (S)."""
    names = DAY_NAMES[week_start:] + DAY_NAMES[:week_start]
    if style == "short":
        return [name[:3] for name in names]
    if style == "letter":
        return [name[0] for name in names]
    if style != "full":
        raise ValueError(f"Unknown header style '{style}'. Available: ['full', 'short', 'letter']")
    return names


def grid_for_date(date: datetime.date, week_start: int = 0) -> CalendarMonth:
    return compute_month_grid(date.year, date.month - 1, week_start)


def neighbour_months(date: datetime.date, week_start: int = 0) -> List[CalendarMonth]:
    """Previous, current and next month grids, as shown on a 3-month overview."""
    return [compute_month_grid(date.year, date.month - 1 + offset, week_start) for offset in (-1, 0, 1)]
