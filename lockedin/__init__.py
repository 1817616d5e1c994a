# lockedin/__init__.py

import click
from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from flask_jwt_extended import JWTManager

from config import Config

db = SQLAlchemy()
jwt = JWTManager()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Init extensions
    db.init_app(app)
    jwt.init_app(app)

    # CORS: the web frontend calls /api/*
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # JWT error handlers
    # -----------------------------
    @jwt.unauthorized_loader
    def unauthorized_callback(reason):
        return (
            jsonify(
                {
                    "message": "Missing or invalid auth token",
                    "error": reason,
                }
            ),
            401,
        )

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        return (
            jsonify(
                {
                    "message": "Invalid auth token",
                    "error": reason,
                }
            ),
            422,
        )

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return jsonify({"message": "Token has expired"}), 401

    # -----------------------------
    # IMPORT BLUEPRINTS (all routes)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.user_routes import users_bp
    from .routes.week_routes import week_bp
    from .routes.rewards_routes import rewards_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(users_bp, url_prefix="/api/users")
    app.register_blueprint(week_bp, url_prefix="/api/week")
    app.register_blueprint(rewards_bp, url_prefix="/api/rewards")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # CLI
    # -----------------------------
    @app.cli.command("seed-users")
    def seed_users_command():
        """Create the configured users if they don't exist yet."""
        from .repository import seed_users

        created = seed_users(app.config.get("SEED_USERS") or [])
        click.echo(f"created {len(created)} user(s)")

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        from . import models  # noqa: F401  (register tables)

        db.create_all()

    return app
