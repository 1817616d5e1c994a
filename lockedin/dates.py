# lockedin/dates.py
"""
Calendar helpers. Date keys are ``YYYY-MM-DD`` strings and every week starts
on Monday, so a week key is the date key of its Monday.
"""
import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple, Union

DATE_KEY_FORMAT = "%Y-%m-%d"

DateLike = Union[date, str]


def parse_date_key(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, DATE_KEY_FORMAT).date()
    except (TypeError, ValueError):
        raise ValueError(f"invalid date key: {value!r}")


def format_date_key(value: DateLike) -> str:
    return parse_date_key(value).strftime(DATE_KEY_FORMAT)


def week_start(value: Optional[DateLike] = None) -> date:
    """Monday of the week containing ``value`` (default: today)."""
    d = parse_date_key(value) if value is not None else date.today()
    return d - timedelta(days=d.weekday())


def week_end(value: Optional[DateLike] = None) -> date:
    return week_start(value) + timedelta(days=6)


def week_key(value: DateLike) -> str:
    return format_date_key(week_start(value))


def week_days(start: DateLike) -> List[date]:
    monday = week_start(start)
    return [monday + timedelta(days=i) for i in range(7)]


def prev_week(start: DateLike) -> date:
    return week_start(start) - timedelta(weeks=1)


def next_week(start: DateLike) -> date:
    return week_start(start) + timedelta(weeks=1)


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def parse_month_key(value: str) -> Tuple[int, int]:
    """``YYYY-MM`` -> (year, month)."""
    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except (TypeError, ValueError):
        raise ValueError(f"invalid month key: {value!r}")
    return parsed.year, parsed.month


def format_week_range(start: DateLike) -> str:
    """'Jan 1 - 7, 2024' or 'Jan 29 - Feb 4, 2024'."""
    monday = week_start(start)
    sunday = monday + timedelta(days=6)
    if monday.month == sunday.month:
        return f"{monday:%b} {monday.day} - {sunday.day}, {sunday.year}"
    return f"{monday:%b} {monday.day} - {sunday:%b} {sunday.day}, {sunday.year}"
