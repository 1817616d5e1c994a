# lockedin/routes/week_routes.py
from datetime import date, timedelta

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from ..dates import format_date_key, format_week_range, next_week, prev_week, week_start
from ..repository import list_users
from ..summaries import week_summary

week_bp = Blueprint("week", __name__)


# -------------------------
# WEEK OVERVIEW
# -------------------------
@week_bp.route("", methods=["GET"])
@jwt_required()
def week_overview():
    """
    GET /api/week?start=2024-01-03   (any day; normalized to its Monday)

    {
      "week_start": "2024-01-01",
      "week_end": "2024-01-07",
      "label": "Jan 1 - 7, 2024",
      "prev_week": "2023-12-25",
      "next_week": "2024-01-08",
      "players": [ { "user": {...}, "days": [...], "weekly": {...}, "lift_days": 3, ... } ]
    }
    """
    raw_start = request.args.get("start")
    try:
        monday = week_start(raw_start) if raw_start else week_start(date.today())
    except ValueError:
        return jsonify({"message": "start must be YYYY-MM-DD"}), 400

    sunday = monday + timedelta(days=6)
    today = date.today()

    players = []
    for user in list_users():
        summary = week_summary(user.id, monday, sunday, today)
        summary["user"] = user.to_dict()
        players.append(summary)

    return (
        jsonify(
            {
                "week_start": format_date_key(monday),
                "week_end": format_date_key(sunday),
                "label": format_week_range(monday),
                "prev_week": format_date_key(prev_week(monday)),
                "next_week": format_date_key(next_week(monday)),
                "players": players,
            }
        ),
        200,
    )
