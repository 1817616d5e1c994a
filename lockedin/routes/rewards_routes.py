# lockedin/routes/rewards_routes.py
from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from ..core.achievements import aggregate
from ..repository import get_user, list_users, load_history

rewards_bp = Blueprint("rewards", __name__)


def _player_rewards(user):
    achievements = aggregate(load_history(user.id))
    summary = {
        "total_medals": sum(len(a["medals"]) for a in achievements.values()),
        "longest_streak": max((a["streak"] for a in achievements.values()), default=0),
    }
    return {
        "user": user.to_dict(),
        "summary": summary,
        "achievements": achievements,
    }


@rewards_bp.route("/overview", methods=["GET"])
@jwt_required()
def rewards_overview():
    """
    Returns:
    {
      "players": [
        {
          "user": { "id": 1, "name": "Thomas" },
          "summary": { "total_medals": 2, "longest_streak": 31 },
          "achievements": {
            "steps": {
              "activity": "steps",
              "cadence": "daily",
              "streak": 31,
              "medals": ["bronze"],
              "highest_medal": "bronze",
              "next_medal": { "medal": "silver", "threshold": 90, "remaining": 59 }
            },
            ...    # lifting includes the current week: 0 until its 5th lift
          }
        },
        ...
      ]
    }
    """
    return jsonify({"players": [_player_rewards(u) for u in list_users()]}), 200


@rewards_bp.route("/<int:user_id>", methods=["GET"])
@jwt_required()
def user_rewards(user_id):
    user = get_user(user_id)
    if not user:
        return jsonify({"message": "user not found"}), 404

    return jsonify(_player_rewards(user)), 200
