# lockedin/core/__init__.py
from .achievements import (
    UserLogHistory,
    aggregate,
    calculate_all_streaks,
    lift_days_by_week,
)
from .constants import (
    DAILY_MILESTONES,
    LIFT_GOAL,
    PAGES_GOAL,
    STEPS_GOAL,
    WEEKLY_MILESTONES,
    Activity,
    Cadence,
    Medal,
)
from .goals import DayStatus, all_goals_hit, day_status, goal_flags
from .medals import get_earned_medals, get_highest_medal, next_medal
from .pages import compute_pages_read, pages_read_by_date, reading_goal_met
from .records import DailyLogRecord, WeeklyLogRecord
from .streaks import (
    calculate_daily_streak,
    calculate_lifting_streak,
    calculate_reading_streak,
    calculate_running_streak,
)
