# lockedin/routes/user_routes.py

from datetime import date
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy.exc import SQLAlchemyError

from .. import db
from ..dates import format_date_key, month_bounds, parse_date_key, parse_month_key, week_start
from ..repository import (
    fetch_journal,
    get_user,
    list_users,
    upsert_daily_log,
    upsert_weekly_log,
)
from ..summaries import day_entries

users_bp = Blueprint("users", __name__)


# ------------------------------
# Helpers
# ------------------------------
def _parse_non_negative_int(v: Any) -> Tuple[Optional[int], bool]:
    """(value, ok). None/"" mean 'not logged'."""
    if v is None or v == "":
        return None, True
    if isinstance(v, bool):
        return None, False
    try:
        n = int(v)
    except (TypeError, ValueError, OverflowError):
        return None, False
    if n < 0 or (isinstance(v, float) and v != n):
        return None, False
    return n, True


def _clean_daily_payload(data: Dict[str, Any]) -> Tuple[Dict[str, Any], Optional[str]]:
    fields: Dict[str, Any] = {}

    for key in ("steps", "current_page"):
        if key in data:
            value, ok = _parse_non_negative_int(data[key])
            if not ok:
                return {}, f"{key} must be a non-negative integer or null"
            fields[key] = value

    for key in ("stretched", "lifted"):
        if key in data:
            value = data[key]
            if value is not None and not isinstance(value, bool):
                return {}, f"{key} must be true, false or null"
            fields[key] = value

    if "learned" in data:
        learned = data["learned"]
        if learned is not None and not isinstance(learned, str):
            return {}, "learned must be a string or null"
        fields["learned"] = (learned or "").strip() or None

    return fields, None


# ------------------------------
# GET /api/users
# ------------------------------
@users_bp.route("", methods=["GET"])
@jwt_required()
def users_list():
    return jsonify({"users": [u.to_dict() for u in list_users()]}), 200


# ------------------------------
# PUT /api/users/<id>/daily/<YYYY-MM-DD>
# ------------------------------
@users_bp.route("/<int:user_id>/daily/<day>", methods=["PUT"])
@jwt_required()
def save_daily_log(user_id, day):
    """
    Partial body, only the given fields change:
    { "steps": 7200, "current_page": 65, "stretched": true, "lifted": false, "learned": "..." }
    """
    user = get_user(user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404

    try:
        log_date = parse_date_key(day)
    except ValueError:
        return jsonify({"message": "date must be YYYY-MM-DD"}), 400

    if log_date > date.today():
        return jsonify({"message": "cannot log a future day"}), 400

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"message": "body must be a JSON object"}), 400
    fields, error = _clean_daily_payload(data)
    if error:
        return jsonify({"message": error}), 400

    try:
        row = upsert_daily_log(user.id, log_date, fields)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"[daily] save failed user_id={user.id} date={day}: {e}")
        return jsonify({"message": "Failed to save daily log"}), 500

    current_app.logger.info(f"[daily] saved user_id={user.id} date={day} fields={sorted(fields)}")
    return jsonify({"log": row.to_dict()}), 200


# ------------------------------
# PUT /api/users/<id>/weekly/<YYYY-MM-DD>
# ------------------------------
@users_bp.route("/<int:user_id>/weekly/<day>", methods=["PUT"])
@jwt_required()
def save_weekly_log(user_id, day):
    """{ "did_3_mile": true }; any day of the week is accepted as the key."""
    user = get_user(user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404

    try:
        monday = week_start(day)
    except ValueError:
        return jsonify({"message": "week must be YYYY-MM-DD"}), 400

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"message": "body must be a JSON object"}), 400
    did_3_mile = data.get("did_3_mile")
    if not isinstance(did_3_mile, bool):
        return jsonify({"message": "did_3_mile must be true or false"}), 400

    try:
        row = upsert_weekly_log(user.id, monday, did_3_mile)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(f"[weekly] save failed user_id={user.id} week={monday}: {e}")
        return jsonify({"message": "Failed to save weekly log"}), 500

    current_app.logger.info(f"[weekly] saved user_id={user.id} week={monday} did_3_mile={did_3_mile}")
    return jsonify({"log": row.to_dict()}), 200


# ------------------------------
# GET /api/users/<id>/calendar?month=YYYY-MM
# ------------------------------
@users_bp.route("/<int:user_id>/calendar", methods=["GET"])
@jwt_required()
def calendar_month(user_id):
    user = get_user(user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404

    today = date.today()
    raw_month = request.args.get("month")
    try:
        year, month = parse_month_key(raw_month) if raw_month else (today.year, today.month)
    except ValueError:
        return jsonify({"message": "month must be YYYY-MM"}), 400

    first, last = month_bounds(year, month)
    days = day_entries(user.id, first, last, today)

    return (
        jsonify(
            {
                "user": user.to_dict(),
                "month": f"{year:04d}-{month:02d}",
                "start": format_date_key(first),
                "end": format_date_key(last),
                "days": days,
                "hit_days": sum(1 for d in days if d["status"] == "hit"),
                "missed_days": sum(1 for d in days if d["status"] == "missed"),
            }
        ),
        200,
    )


# ------------------------------
# GET /api/users/<id>/journal
# ------------------------------
@users_bp.route("/<int:user_id>/journal", methods=["GET"])
@jwt_required()
def journal(user_id):
    user = get_user(user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404

    return jsonify({"user": user.to_dict(), "entries": fetch_journal(user.id)}), 200
