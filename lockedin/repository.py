# lockedin/repository.py
"""
Storage access for log history. Reads come back as the engine expects them:
date-keyed dicts of row dicts. Upserts stage the change on the session and
leave the commit to the caller.
"""
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional

from . import db
from .core.achievements import UserLogHistory
from .dates import format_date_key, week_start
from .models.logs import DailyLog, WeeklyLog
from .models.user import User

logger = logging.getLogger(__name__)

DAILY_FIELDS = ("steps", "current_page", "stretched", "lifted", "learned")


# ------------------------------
# Users
# ------------------------------
def get_user(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def list_users() -> List[User]:
    return User.query.order_by(User.id.asc()).all()


def seed_users(names: Iterable[str]) -> List[User]:
    created = []
    for name in names:
        if User.query.filter_by(name=name).first():
            continue
        user = User(name=name)
        db.session.add(user)
        created.append(user)
    db.session.commit()
    logger.info("seeded users: %s", [u.name for u in created])
    return created


# ------------------------------
# Reads
# ------------------------------
def fetch_daily_logs(
    user_id: int, start: Optional[date] = None, end: Optional[date] = None
) -> Dict[str, Dict[str, Any]]:
    """All daily rows for a user, optionally within [start, end], keyed by date."""
    q = DailyLog.query.filter(DailyLog.user_id == user_id)
    if start is not None:
        q = q.filter(DailyLog.date >= start)
    if end is not None:
        q = q.filter(DailyLog.date <= end)

    rows = q.order_by(DailyLog.date.asc()).all()
    return {format_date_key(row.date): row.to_dict() for row in rows}


def fetch_weekly_logs(
    user_id: int, start: Optional[date] = None, end: Optional[date] = None
) -> Dict[str, Dict[str, Any]]:
    q = WeeklyLog.query.filter(WeeklyLog.user_id == user_id)
    if start is not None:
        q = q.filter(WeeklyLog.week_start_date >= start)
    if end is not None:
        q = q.filter(WeeklyLog.week_start_date <= end)

    rows = q.order_by(WeeklyLog.week_start_date.asc()).all()
    return {format_date_key(row.week_start_date): row.to_dict() for row in rows}


def previous_page_before(user_id: int, day: date) -> Optional[int]:
    """
    Most recent ``current_page`` recorded strictly before ``day``.

    This is the lookback used to resolve the first page delta of a week or
    month; it skips days that were logged without a page.
    """
    row = (
        DailyLog.query.filter(
            DailyLog.user_id == user_id,
            DailyLog.date < day,
            DailyLog.current_page.isnot(None),
        )
        .order_by(DailyLog.date.desc())
        .first()
    )
    return row.current_page if row else None


def fetch_journal(user_id: int) -> List[Dict[str, Any]]:
    rows = (
        DailyLog.query.filter(
            DailyLog.user_id == user_id,
            DailyLog.learned.isnot(None),
        )
        .order_by(DailyLog.date.desc())
        .all()
    )
    return [{"date": format_date_key(r.date), "learned": r.learned} for r in rows]


def load_history(user_id: int) -> UserLogHistory:
    return UserLogHistory(
        daily_logs=fetch_daily_logs(user_id),
        weekly_logs=fetch_weekly_logs(user_id),
    )


# ------------------------------
# Upserts (last write wins)
# ------------------------------
def upsert_daily_log(user_id: int, day: date, fields: Mapping[str, Any]) -> DailyLog:
    """Merge ``fields`` onto the (user, day) row, creating it if needed."""
    row = DailyLog.query.filter_by(user_id=user_id, date=day).first()
    if row is None:
        row = DailyLog(user_id=user_id, date=day)
        db.session.add(row)

    for key in DAILY_FIELDS:
        if key in fields:
            setattr(row, key, fields[key])

    logger.debug("staged daily log user_id=%s date=%s fields=%s", user_id, day, sorted(fields))
    return row


def upsert_weekly_log(user_id: int, day: date, did_3_mile: bool) -> WeeklyLog:
    """``day`` may be any date in the week; the key is its Monday."""
    monday = week_start(day)
    row = WeeklyLog.query.filter_by(user_id=user_id, week_start_date=monday).first()
    if row is None:
        row = WeeklyLog(user_id=user_id, week_start_date=monday)
        db.session.add(row)

    row.did_3_mile = bool(did_3_mile)
    return row
