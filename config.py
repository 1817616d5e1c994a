# config.py
import os
from datetime import timedelta


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-jwt-secret-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "mysql+pymysql://root:@localhost/lockedin"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # shared passphrase for the whole household
    APP_PASSPHRASE = os.environ.get("APP_PASSPHRASE", "change-me")

    # names created by `flask seed-users`
    SEED_USERS = [
        name.strip()
        for name in os.environ.get("SEED_USERS", "Thomas,Nico").split(",")
        if name.strip()
    ]

    # 🔐 JWT config
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    APP_PASSPHRASE = "letmein"
    SEED_USERS = ["Thomas", "Nico"]
