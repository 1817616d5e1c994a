# lockedin/routes/auth_routes.py

import hmac

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required

auth_bp = Blueprint("auth", __name__)

HOUSEHOLD_IDENTITY = "household"


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/unlock", methods=["POST"])
def unlock():
    """
    Accepts:
      - { "passphrase": "..." }
    Returns a bearer token for every other /api route.
    """
    data = request.get_json(silent=True) or {}
    passphrase = data.get("passphrase") or ""  # do NOT strip passphrases

    if not passphrase:
        return jsonify({"message": "passphrase is required"}), 400

    expected = current_app.config.get("APP_PASSPHRASE") or ""
    if not expected or not hmac.compare_digest(
        passphrase.encode("utf-8"), expected.encode("utf-8")
    ):
        current_app.logger.info("[auth/unlock] wrong passphrase")
        return jsonify({"message": "invalid passphrase"}), 401

    access_token = create_access_token(identity=HOUSEHOLD_IDENTITY)
    return jsonify({"token": access_token}), 200


@auth_bp.route("/check", methods=["GET"])
@jwt_required()
def check():
    return jsonify({"authenticated": True, "identity": get_jwt_identity()}), 200
