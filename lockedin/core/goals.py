# lockedin/core/goals.py
from datetime import date
from enum import Enum
from typing import Dict, Optional

from .constants import LIFT_GOAL, STEPS_GOAL, Activity
from .pages import reading_goal_met
from .records import DailyLike, WeeklyLike, as_daily, as_weekly


class DayStatus(str, Enum):
    HIT = "hit"
    MISSED = "missed"
    NO_DATA = "no_data"


# ------------------------------
# Per-activity predicates
# ------------------------------
def steps_goal_met(steps: Optional[int], goal: int = STEPS_GOAL) -> bool:
    return steps is not None and steps >= goal


def stretch_goal_met(stretched: Optional[bool]) -> bool:
    return stretched is True


def lifting_goal_met(lift_days_in_week: Optional[int], goal: int = LIFT_GOAL) -> bool:
    return lift_days_in_week is not None and lift_days_in_week >= goal


def running_goal_met(did_3_mile: Optional[bool]) -> bool:
    return did_3_mile is True


def daily_goal_met(
    activity: Activity,
    record: DailyLike,
    pages_read: Optional[int] = None,
    threshold: Optional[int] = None,
) -> bool:
    """
    Goal test for one day of a daily activity.

    Reading is judged on the derived ``pages_read`` value, never on the raw
    ``current_page``. ``threshold`` overrides the default numeric goal for
    steps and reading; stretch has no threshold.
    """
    log = as_daily(record)

    if activity is Activity.STEPS:
        return steps_goal_met(log.steps, STEPS_GOAL if threshold is None else threshold)
    if activity is Activity.READING:
        if threshold is None:
            return reading_goal_met(pages_read)
        return reading_goal_met(pages_read, threshold)
    if activity is Activity.STRETCH:
        return stretch_goal_met(log.stretched)

    raise ValueError(f"{activity.value} is not a daily activity")


def weekly_goal_met(activity: Activity, value) -> bool:
    """``value`` is the lift-day count for lifting, the weekly record for running."""
    if activity is Activity.LIFTING:
        return lifting_goal_met(value)
    if activity is Activity.RUNNING:
        return running_goal_met(as_weekly(value).did_3_mile)

    raise ValueError(f"{activity.value} is not a weekly activity")


# ------------------------------
# Whole-day evaluation
# ------------------------------
def goal_flags(record: DailyLike, pages_read: Optional[int]) -> Dict[str, bool]:
    log = as_daily(record)
    return {
        "steps": steps_goal_met(log.steps),
        "reading": reading_goal_met(pages_read),
        "stretch": stretch_goal_met(log.stretched),
        "lifted": log.lifted is True,
    }


def all_goals_hit(record: DailyLike, pages_read: Optional[int]) -> bool:
    log = as_daily(record)
    return (
        steps_goal_met(log.steps)
        and reading_goal_met(pages_read)
        and stretch_goal_met(log.stretched)
    )


def day_status(
    record: DailyLike,
    pages_read: Optional[int],
    day: date,
    today: Optional[date] = None,
) -> DayStatus:
    """
    hit / missed / no_data for one calendar day.

    Future days and days without any logged field are ``no_data``, which is
    not the same thing as a miss.
    """
    today = today or date.today()
    if day > today or record is None:
        return DayStatus.NO_DATA

    log = as_daily(record)
    if not log.has_data:
        return DayStatus.NO_DATA

    return DayStatus.HIT if all_goals_hit(log, pages_read) else DayStatus.MISSED
