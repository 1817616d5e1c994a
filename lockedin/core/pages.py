# lockedin/core/pages.py
"""
Reading progress is logged as the page the user is currently on, not as a
count of pages read. Everything here turns that cumulative counter into a
per-day delta.
"""
from typing import Dict, Mapping, Optional

from .constants import PAGES_GOAL
from .records import DailyLike, as_daily


def compute_pages_read(
    current_page: Optional[int], previous_page: Optional[int]
) -> Optional[int]:
    """
    Pages read since the previous recorded page.

      - nothing logged today           -> None
      - no previous page (first log)   -> current_page (book started at page 0)
      - page went down (new book)      -> None, never a negative number
      - otherwise                      -> the delta, 0 included
    """
    if current_page is None:
        return None

    if previous_page is None:
        return current_page

    delta = current_page - previous_page
    if delta < 0:
        return None

    return delta


def reading_goal_met(pages_read: Optional[int], goal: int = PAGES_GOAL) -> bool:
    return pages_read is not None and pages_read >= goal


def pages_read_by_date(
    daily_logs: Mapping[str, DailyLike],
    previous_page: Optional[int] = None,
) -> Dict[str, Optional[int]]:
    """
    Fold the date-keyed series (ascending) into a new date -> pages_read map.

    Each day's previous page is the ``current_page`` of the immediately
    preceding present key, even when that record has no page (the day then
    gets full credit). ``previous_page`` seeds the first key with the
    lookback value: the most recent page recorded before the series.
    """
    result: Dict[str, Optional[int]] = {}
    last_page = previous_page

    for date_key in sorted(daily_logs):
        page = as_daily(daily_logs[date_key]).current_page
        result[date_key] = compute_pages_read(page, last_page)
        last_page = page

    return result
