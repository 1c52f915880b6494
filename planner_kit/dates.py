"""
Date helpers for planner pages: ISO week numbers, week ranges, names and
formatting. Dates are plain ``datetime.date`` values; there is no time zone
handling.
"""

import datetime
from typing import List, Optional

from .models import WeekDescriptor

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
SHORT_DAY_NAMES = [name[:3] for name in DAY_NAMES]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

ONE_DAY = datetime.timedelta(days=1)


def sunday_weekday(date: datetime.date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return date.isoweekday() % 7


def week_number(date: datetime.date) -> int:
    """
    ISO 8601 week number (1-53).

    The date is moved to the Thursday of its week; the year that Thursday
    falls in owns the week. So Jan 1 2021 (a Friday) is week 53 of 2020.
    """
    thursday = date + datetime.timedelta(days=4 - date.isoweekday())
    year_start = datetime.date(thursday.year, 1, 1)
    # ceil((days + 1) / 7) for a non-negative day count
    return (thursday - year_start).days // 7 + 1


def days_in_week(date: datetime.date, start_monday: bool = True) -> List[datetime.date]:
    """The 7 dates of the week containing ``date``, starting Monday or Sunday."""
    offset = date.weekday() if start_monday else sunday_weekday(date)
    first = date - datetime.timedelta(days=offset)
    return [first + datetime.timedelta(days=i) for i in range(7)]


def describe_week(date: datetime.date, start_monday: bool = True) -> WeekDescriptor:
    days = days_in_week(date, start_monday)
    # A Sunday-anchored week is numbered by its Monday
    anchor = days[0] if start_monday else days[1]
    return WeekDescriptor(start_date=days[0], week_number=week_number(anchor), days=days)


def day_name(date: datetime.date) -> str:
    return DAY_NAMES[sunday_weekday(date)]


def short_day_name(date: datetime.date) -> str:
    return SHORT_DAY_NAMES[sunday_weekday(date)]


def pad_zero(num: int) -> str:
    return f"{num:02d}"


def format_date(date: datetime.date) -> str:
    """January 5, 2024"""
    return f"{MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


def format_short_date(date: datetime.date) -> str:
    """1/5/2024"""
    return f"{date.month}/{date.day}/{date.year}"


def format_date_digits(date: datetime.date) -> str:
    """20240105"""
    return f"{date.year:04d}{pad_zero(date.month)}{pad_zero(date.day)}"


def format_week_range(start: datetime.date, end: datetime.date) -> str:
    if start.month == end.month:
        return f"{MONTH_NAMES[start.month - 1]} {start.day} - {end.day}, {end.year}"
    if start.year == end.year:
        return f"{MONTH_NAMES[start.month - 1][:3]} {start.day} - {MONTH_NAMES[end.month - 1][:3]} {end.day}, {end.year}"
    return f"{format_date(start)} - {format_date(end)}"


def normalize_month(year: int, month: int):
    """Rolls a 0-based month index over into the year: (2024, 12) -> (2025, 0)."""
    return year + month // 12, month % 12


def first_day_of_month(date: datetime.date) -> datetime.date:
    return date.replace(day=1)


def last_day_of_month(date: datetime.date) -> datetime.date:
    year, month = normalize_month(date.year, date.month)  # date.month is the next 0-based month
    return datetime.date(year, month + 1, 1) - ONE_DAY


def add_months(date: datetime.date, months: int) -> datetime.date:
    """First day of the month ``months`` away from ``date``."""
    year, month = normalize_month(date.year, date.month - 1 + months)
    return datetime.date(year, month + 1, 1)


def add_years(date: datetime.date, years: int) -> datetime.date:
    try:
        return date.replace(year=date.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year rolls forward
        return date.replace(year=date.year + years, month=3, day=1)


def is_same_day(a: datetime.date, b: datetime.date) -> bool:
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def first_weekday_on_or_after(date: datetime.date, weekday: int) -> datetime.date:
    """First date on or after ``date`` with the given Monday=0 weekday."""
    return date + datetime.timedelta(days=(weekday - date.weekday()) % 7)


def month_start_in_week(week_start: datetime.date) -> Optional[datetime.date]:
    """The 1st of a month if one falls inside the 7 days from ``week_start``."""
    for i in range(7):
        day = week_start + datetime.timedelta(days=i)
        if day.day == 1:
            return day
    return None


def week_contains_month_start(week_start: datetime.date) -> bool:
    return month_start_in_week(week_start) is not None
