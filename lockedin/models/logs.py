# lockedin/models/logs.py
from datetime import datetime
from .. import db


class DailyLog(db.Model):
    """One user's log for one calendar day. ``current_page`` is cumulative."""

    __tablename__ = "daily_logs"
    __table_args__ = (
        db.UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    date = db.Column(db.Date, nullable=False)

    steps = db.Column(db.Integer)
    current_page = db.Column(db.Integer)
    stretched = db.Column(db.Boolean)
    lifted = db.Column(db.Boolean)
    learned = db.Column(db.Text)

    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", backref="daily_logs")

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "date": self.date.isoformat() if self.date else None,
            "steps": self.steps,
            "current_page": self.current_page,
            "stretched": self.stretched,
            "lifted": self.lifted,
            "learned": self.learned,
        }


class WeeklyLog(db.Model):
    __tablename__ = "weekly_logs"
    __table_args__ = (
        db.UniqueConstraint(
            "user_id", "week_start_date", name="uq_weekly_logs_user_week"
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    week_start_date = db.Column(db.Date, nullable=False)  # always a Monday
    did_3_mile = db.Column(db.Boolean, nullable=False, default=False)

    updated_at = db.Column(
        db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    user = db.relationship("User", backref="weekly_logs")

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "week_start_date": self.week_start_date.isoformat()
            if self.week_start_date
            else None,
            "did_3_mile": bool(self.did_3_mile),
        }
