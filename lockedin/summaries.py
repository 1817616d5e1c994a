# lockedin/summaries.py
"""Per-day and per-week payloads shared by the week and calendar routes."""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from .core.constants import LIFT_GOAL
from .core.goals import day_status, goal_flags, lifting_goal_met, running_goal_met
from .core.pages import pages_read_by_date
from .dates import format_date_key
from .repository import fetch_daily_logs, fetch_weekly_logs, previous_page_before


def day_entries(
    user_id: int, start: date, end: date, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    """
    One entry per calendar day in [start, end]:
      {
        "date": "2024-01-03",
        "log": {...} | None,
        "pages_read": 15 | None,
        "goals": {"steps": true, "reading": true, "stretch": false, "lifted": false},
        "status": "hit" | "missed" | "no_data",
        "is_today": false,
        "is_future": false
      }
    """
    today = today or date.today()
    logs = fetch_daily_logs(user_id, start, end)
    pages_read = pages_read_by_date(logs, previous_page_before(user_id, start))

    entries = []
    d = start
    while d <= end:
        key = format_date_key(d)
        log = logs.get(key)
        pr = pages_read.get(key)
        entries.append(
            {
                "date": key,
                "log": log,
                "pages_read": pr,
                "goals": goal_flags(log, pr),
                "status": day_status(log, pr, d, today).value,
                "is_today": d == today,
                "is_future": d > today,
            }
        )
        d += timedelta(days=1)
    return entries


def week_summary(
    user_id: int, monday: date, sunday: date, today: Optional[date] = None
) -> Dict[str, Any]:
    days = day_entries(user_id, monday, sunday, today)
    weekly = fetch_weekly_logs(user_id, monday, monday).get(format_date_key(monday))

    lift_days = sum(1 for d in days if d["log"] and d["log"].get("lifted") is True)
    did_3_mile = bool(weekly and weekly.get("did_3_mile"))

    return {
        "days": days,
        "weekly": weekly,
        "lift_days": lift_days,
        "lift_goal": LIFT_GOAL,
        "lifting_goal_met": lifting_goal_met(lift_days),
        "running_goal_met": running_goal_met(did_3_mile),
    }
