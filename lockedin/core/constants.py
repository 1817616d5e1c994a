# lockedin/core/constants.py
from enum import Enum

# -----------------------------
# Goal thresholds
# -----------------------------
STEPS_GOAL = 6500
PAGES_GOAL = 10        # pages per day
LIFT_GOAL = 5          # lifting days per week

# Streak lengths for medals (days for daily activities, weeks for weekly)
DAILY_MILESTONES = {
    "bronze": 30,      # 1 month
    "silver": 90,      # 3 months
    "gold": 180,       # 6 months
    "platinum": 365,   # 1 year
}

WEEKLY_MILESTONES = {
    "bronze": 4,
    "silver": 13,
    "gold": 26,
    "platinum": 52,
}


class Cadence(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"


class Activity(str, Enum):
    STEPS = "steps"
    READING = "reading"
    STRETCH = "stretch"
    LIFTING = "lifting"
    RUNNING = "running"

    @property
    def cadence(self) -> Cadence:
        if self in (Activity.LIFTING, Activity.RUNNING):
            return Cadence.WEEKLY
        return Cadence.DAILY

    @property
    def is_weekly(self) -> bool:
        return self.cadence is Cadence.WEEKLY


class Medal(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"


# bronze -> platinum
MEDAL_ORDER = (Medal.BRONZE, Medal.SILVER, Medal.GOLD, Medal.PLATINUM)


# persisted field name -> activity it scores
FIELD_ACTIVITIES = {
    "steps": Activity.STEPS,
    "current_page": Activity.READING,
    "stretched": Activity.STRETCH,
    "lifted": Activity.LIFTING,
    "did_3_mile": Activity.RUNNING,
}


def resolve_activity(value) -> Activity:
    """Accept an Activity, its value ("stretch") or a record field ("stretched")."""
    if isinstance(value, Activity):
        return value
    if value in FIELD_ACTIVITIES:
        return FIELD_ACTIVITIES[value]
    return Activity(value)
