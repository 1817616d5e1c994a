# lockedin/core/medals.py
from typing import Dict, List, Optional

from .constants import DAILY_MILESTONES, MEDAL_ORDER, WEEKLY_MILESTONES


def milestones_for(is_weekly: bool = False) -> Dict[str, int]:
    return WEEKLY_MILESTONES if is_weekly else DAILY_MILESTONES


def get_earned_medals(streak: int, is_weekly: bool = False) -> List[str]:
    """Every tier whose threshold the streak has reached, bronze first."""
    milestones = milestones_for(is_weekly)
    return [m.value for m in MEDAL_ORDER if streak >= milestones[m.value]]


def get_highest_medal(streak: int, is_weekly: bool = False) -> Optional[str]:
    earned = get_earned_medals(streak, is_weekly)
    return earned[-1] if earned else None


def next_medal(streak: int, is_weekly: bool = False) -> Optional[Dict[str, int]]:
    """
    The first tier not yet earned and how far away it is:
      { "medal": "silver", "threshold": 90, "remaining": 12 }
    None once platinum is reached.
    """
    milestones = milestones_for(is_weekly)
    for m in MEDAL_ORDER:
        threshold = milestones[m.value]
        if streak < threshold:
            return {
                "medal": m.value,
                "threshold": threshold,
                "remaining": threshold - streak,
            }
    return None
