# lockedin/models/__init__.py
from .user import User
from .logs import DailyLog, WeeklyLog
