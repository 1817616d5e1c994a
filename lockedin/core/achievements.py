# lockedin/core/achievements.py
"""
Per-user achievement summary: every activity's streak and medals, computed
from raw log history on each call. Nothing here is stored.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from ..dates import week_key
from .constants import Activity
from .medals import get_earned_medals, get_highest_medal, next_medal
from .records import DailyLike, WeeklyLike, as_daily
from .streaks import (
    calculate_daily_streak,
    calculate_lifting_streak,
    calculate_reading_streak,
    calculate_running_streak,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserLogHistory:
    daily_logs: Mapping[str, DailyLike] = field(default_factory=dict)
    weekly_logs: Mapping[str, WeeklyLike] = field(default_factory=dict)
    # pre-aggregated lift-day counts; derived from daily_logs when missing
    lift_days_by_week: Optional[Mapping[str, int]] = None


def lift_days_by_week(daily_logs: Mapping[str, DailyLike]) -> Dict[str, int]:
    """
    Count ``lifted is True`` days per Monday-start week.

    Every week with at least one daily record gets a key, so a logged week
    without lifting shows up as 0 rather than disappearing. That includes the
    current, unfinished week: until its fifth lifting day it is a miss, and
    the lifting streak reads 0 from Monday onward.
    """
    counts: Dict[str, int] = {}
    for date_key, record in daily_logs.items():
        wk = week_key(date_key)
        counts.setdefault(wk, 0)
        if as_daily(record).lifted is True:
            counts[wk] += 1
    return counts


def _guarded(activity: Activity, compute: Callable[[], int]) -> int:
    try:
        return compute()
    except Exception:
        logger.exception("streak computation failed for %s", activity.value)
        return 0


def calculate_all_streaks(
    daily_logs: Mapping[str, DailyLike],
    weekly_logs: Mapping[str, WeeklyLike],
    lifting_by_week: Optional[Mapping[str, int]] = None,
) -> Dict[str, int]:
    """
    { "steps": 12, "reading": 3, "stretch": 0, "lifting": 2, "running": 5 }

    Each activity is computed on its own; one failing yields 0 for that
    activity only.
    """
    daily_logs = daily_logs or {}
    weekly_logs = weekly_logs or {}

    def _lifting() -> int:
        by_week = lifting_by_week if lifting_by_week is not None else lift_days_by_week(daily_logs)
        return calculate_lifting_streak(by_week)

    computations = {
        Activity.STEPS: lambda: calculate_daily_streak(daily_logs, Activity.STEPS),
        Activity.READING: lambda: calculate_reading_streak(daily_logs),
        Activity.STRETCH: lambda: calculate_daily_streak(daily_logs, Activity.STRETCH),
        Activity.LIFTING: _lifting,
        Activity.RUNNING: lambda: calculate_running_streak(weekly_logs),
    }

    return {
        activity.value: _guarded(activity, compute)
        for activity, compute in computations.items()
    }


def activity_summary(activity: Activity, streak: int) -> Dict[str, Any]:
    weekly = activity.is_weekly
    return {
        "activity": activity.value,
        "cadence": activity.cadence.value,
        "streak": streak,
        "medals": get_earned_medals(streak, weekly),
        "highest_medal": get_highest_medal(streak, weekly),
        "next_medal": next_medal(streak, weekly),
    }


def aggregate(history: UserLogHistory) -> Dict[str, Dict[str, Any]]:
    """
    Streaks and medals for all five activities:

      {
        "steps":   {"activity": "steps", "cadence": "daily", "streak": 31,
                    "medals": ["bronze"], "highest_medal": "bronze",
                    "next_medal": {"medal": "silver", "threshold": 90, "remaining": 59}},
        "reading": {...},
        "stretch": {...},
        "lifting": {...},
        "running": {...},
      }
    """
    streaks = calculate_all_streaks(
        history.daily_logs,
        history.weekly_logs,
        history.lift_days_by_week,
    )
    return {
        activity.value: activity_summary(activity, streaks[activity.value])
        for activity in Activity
    }
