# lockedin/core/streaks.py
"""
Streak counting over sparse, date-keyed log history.

A streak is the number of most-recent *present* periods that hit the goal,
walking backward from the newest key until the first present period that
misses. Keys are never filled in day by day: a period with no record is
skipped, only an explicit miss ends the streak.
"""
import logging
from typing import Callable, Iterable, Mapping, Optional

from .constants import Activity, resolve_activity
from .goals import daily_goal_met, lifting_goal_met, running_goal_met
from .pages import pages_read_by_date, reading_goal_met
from .records import DailyLike, WeeklyLike, as_daily, as_weekly

logger = logging.getLogger(__name__)


def _count_leading_hits(keys: Iterable[str], is_hit: Callable[[str], bool]) -> int:
    streak = 0
    for key in sorted(keys, reverse=True):
        if not is_hit(key):
            break
        streak += 1
    return streak


def calculate_daily_streak(
    daily_logs: Mapping[str, DailyLike],
    activity: Activity = Activity.STEPS,
    threshold: Optional[int] = None,
) -> int:
    """
    Streak for steps or stretch.

    ``activity`` may also be the record field name ("steps", "stretched").
    ``threshold`` overrides the steps goal; a boolean threshold means a plain
    ``is True`` test, which is what stretch always uses. Reading goes through
    :func:`calculate_reading_streak` because it needs page deltas rather than
    a field on the record. The "lifted" field name counts consecutive lifting
    days; the lifting goal itself is weekly (:func:`calculate_lifting_streak`).
    """
    if activity == "lifted":
        return _count_leading_hits(
            daily_logs, lambda key: as_daily(daily_logs[key]).lifted is True
        )

    activity = resolve_activity(activity)
    if isinstance(threshold, bool):
        threshold = None
    if activity is Activity.READING:
        return calculate_reading_streak(daily_logs, threshold)

    return _count_leading_hits(
        daily_logs,
        lambda key: daily_goal_met(activity, daily_logs[key], threshold=threshold),
    )


def calculate_reading_streak(
    daily_logs: Mapping[str, DailyLike],
    goal: Optional[int] = None,
    previous_page: Optional[int] = None,
) -> int:
    if not daily_logs:
        return 0

    pages_read = pages_read_by_date(daily_logs, previous_page)
    logger.debug("reading deltas: %s", pages_read)

    if goal is None:
        return _count_leading_hits(pages_read, lambda key: reading_goal_met(pages_read[key]))
    return _count_leading_hits(pages_read, lambda key: reading_goal_met(pages_read[key], goal))


def calculate_lifting_streak(lift_days_by_week: Mapping[str, int]) -> int:
    """
    ``lift_days_by_week`` maps week-start keys to lifting-day counts. The
    newest key is walked first even if that week is still in progress.
    """
    return _count_leading_hits(
        lift_days_by_week,
        lambda week: lifting_goal_met(lift_days_by_week[week]),
    )


def calculate_running_streak(weekly_logs: Mapping[str, WeeklyLike]) -> int:
    return _count_leading_hits(
        weekly_logs,
        lambda week: running_goal_met(as_weekly(weekly_logs[week]).did_3_mile),
    )
